# tests/conftest.py
import pytest

from jsveil.utils.obfuscator import JavaScriptObfuscator, ObfuscationResult


@pytest.fixture
def fake_engine(monkeypatch):
    """
    Replaces the Node.js engine with a deterministic stand-in.
    Output is tagged with the profile it ran under and whitespace-collapsed.
    Returns the list of (source, options) calls.
    """
    calls = []

    def _obfuscate(source, options):
        calls.append((source, dict(options)))
        tag = "/*std*/" if options["stringArray"] else "/*safe*/"
        return ObfuscationResult(tag + " ".join(source.split()))

    monkeypatch.setattr(JavaScriptObfuscator, "obfuscate", staticmethod(_obfuscate))
    return calls


@pytest.fixture
def failing_engine(monkeypatch):
    from jsveil.errors import TransformError

    def _obfuscate(source, options):
        raise TransformError("Line 1: Unexpected token")

    monkeypatch.setattr(JavaScriptObfuscator, "obfuscate", staticmethod(_obfuscate))


VUE_TEMPLATE = """<template>
  <div class="hello">{{ msg }}</div>
</template>

<script>
export default {
  name: 'HelloWorld',
  data() {
    return { msg: 'Welcome' }
  }
}
</script>

<style scoped>
.hello { color: red; }
</style>
"""


@pytest.fixture
def sample_project(tmp_path):
    """A project with 3 .js files and 2 .vue files spread over subdirectories."""
    root = tmp_path / "project"
    (root / "src" / "components").mkdir(parents=True)
    (root / "lib").mkdir()

    (root / "main.js").write_text("const answer = 42;\nconsole.log('answer', answer);\n", encoding="utf-8")
    (root / "src" / "util.js").write_text("export function add(a, b) {\n  return a + b;\n}\n", encoding="utf-8")
    (root / "lib" / "LEGACY.JS").write_text("var x = 'legacy';\n", encoding="utf-8")
    (root / "src" / "App.vue").write_text(VUE_TEMPLATE, encoding="utf-8")
    (root / "src" / "components" / "Hello.vue").write_text(VUE_TEMPLATE, encoding="utf-8")
    (root / "README.md").write_text("# Demo", encoding="utf-8")

    return root
