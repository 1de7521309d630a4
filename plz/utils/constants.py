"""Centralized constants for plz."""

# File name of the persisted alias/config document
CONFIG_FILENAME = 'plz_config.json'
CONFIG_ENV_VAR = 'PLZ_CONFIG'
LOG_FILENAME = 'plz.log'

# Files considered launchable game executables during autoadd (lower-case suffixes)
EXECUTABLE_SUFFIXES = ('.exe', '.x86_64', '.appimage')

# Installers, redistributables and crash handlers that ship next to real games.
# Compared against the lower-cased file name.
EXECUTABLE_BLACKLIST = {
    'unins000.exe',
    'unins001.exe',
    'unins002.exe',
    'uninstall.exe',
    'setup.exe',
    'unitycrashhandler32.exe',
    'unitycrashhandler64.exe',
    'crashreportclient.exe',
    'crashpad_handler.exe',
    'crashhandler.exe',
    'dxsetup.exe',
    'dxwebsetup.exe',
    'oalinst.exe',
    'vcredist_x86.exe',
    'vcredist_x64.exe',
    'vc_redist.x86.exe',
    'vc_redist.x64.exe',
    'dotnetfx40_full_setup.exe',
    'physxsetup.exe',
    'ue4prereqsetup_x64.exe',
    'ueprereqsetup_x64.exe',
}

# Network
REQUEST_TIMEOUT = 5  # seconds
USER_AGENT_TEMPLATE = 'plz/{version} (+game alias manager)'
RELEASES_URL = 'https://api.github.com/repos/plz-cli/plz/releases/latest'

# Providers, in the order they are listed in help output
PROVIDERS = ['gamevault', 'mirrorhub', 'linkdepot']
DEFAULT_PROVIDER = 'gamevault'

PROVIDER_URLS = {
    'gamevault': 'https://gamevault.example',
    'mirrorhub': 'https://mirrorhub.example',
    'linkdepot': 'https://linkdepot.example',
}

# Each provider has two explicitly ordered fallbacks
FALLBACKS = {
    'gamevault': ('mirrorhub', 'linkdepot'),
    'mirrorhub': ('gamevault', 'linkdepot'),
    'linkdepot': ('mirrorhub', 'gamevault'),
}
