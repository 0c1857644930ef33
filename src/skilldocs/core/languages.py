"""Code fence language tags and apparent-syntax detection.

Detection is heuristic. `detect_language` only answers when the body carries
markers that are specific to one language; otherwise it returns None and the
declared tag is trusted.
"""

import json
import re
from collections.abc import Callable

# Canonical language for each recognised fence tag
LANGUAGE_ALIASES: dict[str, str] = {
    "yaml": "yaml",
    "yml": "yaml",
    "json": "json",
    "jsonc": "json",
    "json5": "json",
    "hcl": "hcl",
    "tf": "hcl",
    "terraform": "hcl",
    "java": "java",
    "javascript": "javascript",
    "js": "javascript",
    "jsx": "javascript",
    "mjs": "javascript",
    "cjs": "javascript",
    "typescript": "typescript",
    "ts": "typescript",
    "tsx": "typescript",
    "python": "python",
    "py": "python",
    "bash": "shell",
    "sh": "shell",
    "shell": "shell",
    "zsh": "shell",
    "console": "shell",
    "shell-session": "shell",
    "dockerfile": "dockerfile",
    "docker": "dockerfile",
    "kotlin": "kotlin",
    "kt": "kotlin",
    "groovy": "groovy",
    "gradle": "groovy",
    "xml": "xml",
    "html": "html",
    "css": "css",
    "scss": "css",
    "sql": "sql",
    "go": "go",
    "rust": "rust",
    "rego": "rego",
    "toml": "toml",
    "ini": "ini",
    "properties": "ini",
    "makefile": "makefile",
    "make": "makefile",
    "powershell": "powershell",
    "ps1": "powershell",
    "graphql": "graphql",
    "promql": "promql",
    "diff": "diff",
    "mermaid": "mermaid",
    "markdown": "markdown",
    "md": "markdown",
    "text": "text",
    "txt": "text",
    "plaintext": "text",
    "plain": "text",
    "none": "text",
}

# Declared language -> detected languages accepted for it
_COMPATIBLE: dict[str, frozenset[str]] = {
    "yaml": frozenset({"yaml", "json"}),
    "json": frozenset({"json"}),
    "hcl": frozenset({"hcl"}),
    "java": frozenset({"java"}),
    "javascript": frozenset({"javascript"}),
    "typescript": frozenset({"typescript", "javascript"}),
    "python": frozenset({"python"}),
    "shell": frozenset({"shell"}),
    "dockerfile": frozenset({"dockerfile"}),
}

DETECTABLE_LANGUAGES = frozenset(_COMPATIBLE)


def canonical_language(tag: str, extra_languages: tuple[str, ...] = ()) -> str | None:
    """Map a fence tag to its canonical language, or None if unknown."""
    lowered = tag.lower()
    if lowered in LANGUAGE_ALIASES:
        return LANGUAGE_ALIASES[lowered]
    if lowered in extra_languages:
        return lowered
    return None


def is_compatible(declared: str, detected: str) -> bool:
    accepted = _COMPATIBLE.get(declared)
    if accepted is None:
        return True
    return detected in accepted


_HCL_BLOCK = re.compile(
    r'^\s*(resource|data|provider|variable|output|module|terraform|locals)\b(\s+"[^"]*")*\s*\{',
    re.MULTILINE,
)
# Syntax that TypeScript and JavaScript never produce
_JAVA_MARKERS = (
    re.compile(r"^\s*package\s+[\w.]+;\s*$", re.MULTILINE),
    re.compile(r"^\s*import\s+(static\s+)?[\w.]+(\.\*)?;\s*$", re.MULTILINE),
    re.compile(
        r"^\s*(public|private|protected)\s+(abstract\s+|static\s+|final\s+)*"
        r"(class|interface|enum|record)\s+\w+",
        re.MULTILINE,
    ),
    re.compile(
        r"^\s*(public|private|protected)\s+(static\s+|final\s+|synchronized\s+|abstract\s+)*"
        r"(?!(async|static|readonly|abstract|override|get|set)\b)"
        r"[\w<>\[\], ]+\s+\w+\s*\([^):]*\)\s*(throws\s+[\w., ]+)?\s*\{",
        re.MULTILINE,
    ),
    re.compile(
        r"^[ \t]*@\w+(\([^)]*\))?[ \t]*\n"
        r"[ \t]*((public|protected|private)\s+)?(static\s+)?void\s+\w+\s*\(",
        re.MULTILINE,
    ),
    re.compile(
        r"^\s*(final\s+)?([A-Z]\w*(<[^;=]*>)?|int|long|double|float|boolean|char|byte|short)"
        r"(\[\])*\s+[a-z]\w*\s*=\s*[^;]+;\s*$",
        re.MULTILINE,
    ),
)
_TYPESCRIPT_MARKERS = (
    re.compile(r"^\s*(export\s+)?(interface|type)\s+\w+(<[^>]*>)?\s*(=|\{|extends)", re.MULTILINE),
    re.compile(r"\)\s*:\s*(Promise<|void\b|string\b|number\b|boolean\b)"),
    re.compile(r"\b(const|let)\s+\w+\s*:\s*[\w<>\[\]|]+\s*="),
    re.compile(r"\w+\s*\??:\s*(string|number|boolean|unknown|any)\b\s*[,;)=]"),
    re.compile(
        r"^\s*(public|private|protected)\s+(static\s+|override\s+)*async\s+\w+\s*\(", re.MULTILINE
    ),
    re.compile(
        r"^\s*(public|private|protected)\s+(readonly\s+|static\s+)*\w+\s*[?!]?:\s*\S", re.MULTILINE
    ),
)
_JAVASCRIPT_MARKERS = (
    re.compile(r"^\s*(const|let)\s+[\w{}\[\], ]+\s*=", re.MULTILINE),
    re.compile(r"^\s*import\s+.+\s+from\s+['\"][^'\"]+['\"];?\s*$", re.MULTILINE),
    re.compile(r"\brequire\(\s*['\"][^'\"]+['\"]\s*\)"),
    re.compile(
        r"\bmodule\.exports\b|^\s*export\s+(default\s+)?(function|const|class)\b", re.MULTILINE
    ),
    re.compile(r"^\s*(describe|it|test)\(\s*['\"`]", re.MULTILINE),
    re.compile(r"^\s*(async\s+)?function\s*\w*\s*\([^)]*\)\s*\{", re.MULTILINE),
)
_PYTHON_MARKERS = (
    re.compile(r"^\s*(async\s+)?def\s+\w+\s*\([^)]*\)\s*(->\s*[^:]+)?:\s*$", re.MULTILINE),
    re.compile(r"^\s*from\s+[\w.]+\s+import\s+[\w*, ()]+$", re.MULTILINE),
    re.compile(r"^\s*class\s+\w+(\([^)]*\))?:\s*$", re.MULTILINE),
)
_DOCKERFILE_INSTRUCTION = re.compile(
    r"^(FROM|RUN|COPY|ADD|CMD|ENTRYPOINT|WORKDIR|ENV|EXPOSE|ARG|USER|LABEL)\s", re.MULTILINE
)
_SHELL_COMMAND = re.compile(
    r"^\s*(\$\s+)?(sudo\s+)?(kubectl|helm|terraform|istioctl|docker|git|npm|npx|yarn|pnpm|mvn|"
    r"gradle|\./gradlew|\./mvnw|pip|curl|wget|cd|export|echo|mkdir|chmod|aws|gcloud|az|"
    r"brew|apt-get|make|java|node|python3?)\b"
)
_YAML_LINE = re.compile(r"""^\s*(-\s+)?["']?[\w.\-/]+["']?\s*:(\s|$)|^\s*-(\s|$)""")
_YAML_START = re.compile(r"^(---|apiVersion:|kind:|[\w.\-]+:(\s|$)|-\s)")


def _looks_like_json(body: str) -> bool:
    stripped = body.strip()
    if not stripped or stripped[0] not in "{[":
        return False
    try:
        json.loads(stripped)
    except ValueError:
        return False
    return True


def _looks_like_hcl(body: str) -> bool:
    return _HCL_BLOCK.search(body) is not None


def _looks_like_dockerfile(body: str) -> bool:
    instructions = {m.group(1) for m in _DOCKERFILE_INSTRUCTION.finditer(body)}
    return "FROM" in instructions and len(instructions) >= 2


def _looks_like_java(body: str) -> bool:
    return any(marker.search(body) for marker in _JAVA_MARKERS)


def _looks_like_typescript(body: str) -> bool:
    return any(marker.search(body) for marker in _TYPESCRIPT_MARKERS)


def _looks_like_python(body: str) -> bool:
    return any(marker.search(body) for marker in _PYTHON_MARKERS)


def _looks_like_javascript(body: str) -> bool:
    return any(marker.search(body) for marker in _JAVASCRIPT_MARKERS)


def _content_lines(body: str) -> list[str]:
    return [
        line for line in body.splitlines() if line.strip() and not line.lstrip().startswith("#")
    ]


def _looks_like_yaml(body: str) -> bool:
    lines = _content_lines(body)
    if len(lines) < 2 or not _YAML_START.match(lines[0]):
        return False
    yaml_lines = sum(1 for line in lines if _YAML_LINE.match(line) or line.strip() == "---")
    return yaml_lines / len(lines) >= 0.6


def _looks_like_shell(body: str) -> bool:
    lines = _content_lines(body)
    if not lines:
        return False
    commands = sum(1 for line in lines if _SHELL_COMMAND.match(line))
    return commands / len(lines) >= 0.5


# Most specific first
_DETECTORS: tuple[tuple[str, Callable[[str], bool]], ...] = (
    ("json", _looks_like_json),
    ("hcl", _looks_like_hcl),
    ("dockerfile", _looks_like_dockerfile),
    ("java", _looks_like_java),
    ("typescript", _looks_like_typescript),
    ("python", _looks_like_python),
    ("javascript", _looks_like_javascript),
    ("yaml", _looks_like_yaml),
    ("shell", _looks_like_shell),
)


def detect_language(body: str) -> str | None:
    """Return the canonical language the body apparently is, or None."""
    if not body.strip():
        return None
    for language, looks_like in _DETECTORS:
        if looks_like(body):
            return language
    return None
