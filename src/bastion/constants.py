"""Fixed identifiers that must match the BeamNG.drive install layout."""

# Steam
DEFAULT_STEAM_EXEC = "steam"
BEAMNG_STEAM_ID = "284160"
STEAM_URI = f"steam://rungameid/{BEAMNG_STEAM_ID}"

# Paths relative to the install root
WINDOWS_EXEC_PATH = "Bin64/BeamNG.drive.x64.exe"
WINDOWS_LAUNCHER_PATH = "BeamNG.drive.exe"
LINUX_EXEC_PATH = "BinLinux/BeamNG.drive.x64"

# Path relative to the Game Porting Toolkit app bundle
GPTK_WINE_PATH = "Contents/Resources/wine/bin/wine"

# Windows binaries are started through the command shell.
WINDOWS_SHELL = "cmd.exe"
WINDOWS_SHELL_FLAGS = ("/C",)

# Settings storage
SETTINGS_ENV = "BASTION_SETTINGS"
SETTINGS_FILENAME = "settings.json"
