# src/jsveil/core/transform.py
from jsveil.config import SAFE_PROFILE, STANDARD_PROFILE
from jsveil.core.vue import is_complex_script
from jsveil.models import TransformProfile
from jsveil.utils.obfuscator import JavaScriptObfuscator

def select_profile(content: str) -> TransformProfile:
    return SAFE_PROFILE if is_complex_script(content) else STANDARD_PROFILE

def obfuscate(source_text: str, profile: TransformProfile) -> str:
    """Runs the engine once under `profile`. Raises TransformError on failure; never retries."""
    result = JavaScriptObfuscator.obfuscate(source_text, profile.options)
    return result.get_obfuscated_code()
