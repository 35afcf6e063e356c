# src/jsveil/config.py
from types import MappingProxyType

from jsveil.models import TransformProfile

JS_EXTENSION = ".js"
VUE_EXTENSION = ".vue"

BACKUP_SUFFIX = "_backup_"

# Console preview limits
PREVIEW_CHILD_LIMIT = 5
VUE_LIST_LIMIT = 10
MARKUP_PREVIEW_CHARS = 100

# Overrides the obfuscator command, e.g. "node /opt/bin/javascript-obfuscator"
ENGINE_ENV_VAR = "JSVEIL_OBFUSCATOR"
ENGINE_EXECUTABLE = "javascript-obfuscator"

# Engine options keep the engine's own (camelCase) spelling.
# controlFlowFlattening and deadCodeInjection stay off (runtime cost of the output).
STANDARD_OPTIONS = {
    "compact": True,
    "controlFlowFlattening": False,
    "deadCodeInjection": False,
    "debugProtection": False,
    "disableConsoleOutput": False,
    "identifierNamesGenerator": "hexadecimal",
    "log": False,
    "numbersToExpressions": False,
    "renameGlobals": False,
    "selfDefending": False,
    "simplify": True,
    "splitStrings": False,
    "stringArray": True,
    "stringArrayEncoding": ["none"],
    "stringArrayThreshold": 0.75,
    "unicodeEscapeSequence": False,
}

# Used for render functions / JSX-like scripts
SAFE_OPTIONS = {
    **STANDARD_OPTIONS,
    "controlFlowFlattening": False,
    "deadCodeInjection": False,
    "stringArray": False,
    "splitStrings": False,
    "stringArrayThreshold": 0,
}

STANDARD_PROFILE = TransformProfile("standard", MappingProxyType(STANDARD_OPTIONS))
SAFE_PROFILE = TransformProfile("safe", MappingProxyType(SAFE_OPTIONS))

# Any one of these marks a script as complex
COMPLEX_MARKERS = (
    "render(h)",
    "render: function(h)",
    "functional:",
)

# All of these together mark a script as complex
JSX_MARKERS = ("return", "(", "<", "/>")
