"""Launch services: install lookup, argument building and process start.

Nothing in this package logs or prints; failures are raised as
`bastion.util.errors.ExecError` subclasses for the caller to render.
"""
