"""Map file extensions to code fence labels."""

from pathlib import PurePosixPath

# extension -> (fence label, display name)
LANGUAGES = {
    ".py": ("python", "Python"),
    ".pyi": ("python", "Python"),
    ".ts": ("typescript", "TypeScript"),
    ".tsx": ("tsx", "TypeScript"),
    ".js": ("javascript", "JavaScript"),
    ".jsx": ("jsx", "JavaScript"),
    ".mjs": ("javascript", "JavaScript"),
    ".cjs": ("javascript", "JavaScript"),
    ".go": ("go", "Go"),
    ".rs": ("rust", "Rust"),
    ".java": ("java", "Java"),
    ".kt": ("kotlin", "Kotlin"),
    ".kts": ("kotlin", "Kotlin"),
    ".scala": ("scala", "Scala"),
    ".rb": ("ruby", "Ruby"),
    ".php": ("php", "PHP"),
    ".cs": ("csharp", "C#"),
    ".c": ("c", "C"),
    ".h": ("c", "C"),
    ".cc": ("cpp", "C++"),
    ".cpp": ("cpp", "C++"),
    ".hpp": ("cpp", "C++"),
    ".swift": ("swift", "Swift"),
    ".m": ("objectivec", "Objective-C"),
    ".sh": ("bash", "shell"),
    ".bash": ("bash", "shell"),
    ".sql": ("sql", "SQL"),
    ".html": ("html", "HTML"),
    ".css": ("css", "CSS"),
    ".scss": ("scss", "SCSS"),
    ".vue": ("vue", "Vue"),
    ".json": ("json", "JSON"),
    ".yml": ("yaml", "YAML"),
    ".yaml": ("yaml", "YAML"),
    ".toml": ("toml", "TOML"),
    ".md": ("markdown", "Markdown"),
    ".tf": ("hcl", "Terraform"),
}

SPECIAL_FILENAMES = {
    "Dockerfile": ("dockerfile", "Dockerfile"),
    "Makefile": ("makefile", "Makefile"),
}


def detect_language(path: str) -> tuple[str, str]:
    """Return (fence label, display name) for a file path.

    Unknown extensions get an unlabelled fence.
    """
    name = PurePosixPath(path).name
    if name in SPECIAL_FILENAMES:
        return SPECIAL_FILENAMES[name]
    return LANGUAGES.get(PurePosixPath(path).suffix.lower(), ("", "code"))
