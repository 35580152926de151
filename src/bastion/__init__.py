"""bastion: launch BeamNG.drive through Steam, natively, or through GPTK."""

__version__ = "0.1.0"
