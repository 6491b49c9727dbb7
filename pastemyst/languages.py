"""Discord code block language tags and the PasteMyst languages they map to."""

from __future__ import annotations

import enum
import types
import typing


class PasteMystLanguage(str, enum.Enum):
    AUTODETECT = "autodetect"
    PLAINTEXT = "plaintext"
    BASH = "shell"
    C = "c"
    CPP = "cpp"
    CSHARP = "csharp"
    CLOJURE = "clojure"
    COFFEESCRIPT = "coffeescript"
    CSS = "css"
    D = "d"
    DART = "dart"
    DIFF = "diff"
    DOCKERFILE = "dockerfile"
    ELIXIR = "elixir"
    ERLANG = "erlang"
    FSHARP = "fsharp"
    GO = "go"
    GROOVY = "groovy"
    HASKELL = "haskell"
    HTML = "html"
    JAVA = "java"
    JAVASCRIPT = "javascript"
    JSON = "json"
    JULIA = "julia"
    KOTLIN = "kotlin"
    LUA = "lua"
    MARKDOWN = "markdown"
    NGINX = "nginx"
    OBJECTIVEC = "objectivec"
    PASCAL = "pascal"
    PERL = "perl"
    PHP = "php"
    POWERSHELL = "powershell"
    PYTHON = "python"
    R = "r"
    RUBY = "ruby"
    RUST = "rust"
    SCALA = "scala"
    SQL = "sql"
    SWIFT = "swift"
    TOML = "toml"
    TYPESCRIPT = "typescript"
    VB = "vb"
    XML = "xml"
    YAML = "yaml"

    # Returned for tags with no PasteMyst counterpart, never sent to the API
    UNKNOWN = "Unknown"

    def __str__(self) -> str:
        return self.value


_L = PasteMystLanguage

# Aliases Discord's highlighter accepts after an opening ```
_ALIASES: typing.Dict[PasteMystLanguage, typing.Tuple[str, ...]] = {
    _L.PLAINTEXT: ("plaintext", "text", "txt", "plain"),
    _L.BASH: ("shell", "bash", "sh", "zsh", "console", "shellsession"),
    _L.C: ("c", "h"),
    _L.CPP: ("cpp", "c++", "cc", "cxx", "hpp", "hh", "hxx", "h++"),
    _L.CSHARP: ("csharp", "cs", "c#"),
    _L.CLOJURE: ("clojure", "clj"),
    _L.COFFEESCRIPT: ("coffeescript", "coffee", "cson", "iced"),
    _L.CSS: ("css",),
    _L.D: ("d",),
    _L.DART: ("dart",),
    _L.DIFF: ("diff", "patch"),
    _L.DOCKERFILE: ("dockerfile", "docker"),
    _L.ELIXIR: ("elixir", "ex", "exs"),
    _L.ERLANG: ("erlang", "erl"),
    _L.FSHARP: ("fsharp", "fs", "f#"),
    _L.GO: ("go", "golang"),
    _L.GROOVY: ("groovy",),
    _L.HASKELL: ("haskell", "hs"),
    _L.HTML: ("html", "xhtml", "htm"),
    _L.JAVA: ("java", "jsp"),
    _L.JAVASCRIPT: ("javascript", "js", "jsx", "mjs", "cjs"),
    _L.JSON: ("json",),
    _L.JULIA: ("julia", "jl"),
    _L.KOTLIN: ("kotlin", "kt", "kts"),
    _L.LUA: ("lua",),
    _L.MARKDOWN: ("markdown", "md", "mkdown", "mkd"),
    _L.NGINX: ("nginx", "nginxconf"),
    _L.OBJECTIVEC: ("objectivec", "objc", "obj-c", "mm", "m"),
    _L.PASCAL: ("pascal", "delphi", "dpr", "pas"),
    _L.PERL: ("perl", "pl", "pm"),
    _L.PHP: ("php", "php3", "php4", "php5", "php6", "php7", "php8"),
    _L.POWERSHELL: ("powershell", "ps", "ps1"),
    _L.PYTHON: ("python", "py", "py3", "gyp", "ipython"),
    _L.R: ("r",),
    _L.RUBY: ("ruby", "rb", "gemspec", "podspec", "thor", "irb"),
    _L.RUST: ("rust", "rs"),
    _L.SCALA: ("scala",),
    _L.SQL: ("sql", "mysql", "pgsql", "postgres", "postgresql"),
    _L.SWIFT: ("swift",),
    _L.TOML: ("toml", "ini"),
    _L.TYPESCRIPT: ("typescript", "ts", "tsx"),
    _L.VB: ("vb", "vbnet", "vba", "vbscript", "vbs"),
    _L.XML: ("xml", "rss", "atom", "xsd", "xsl", "plist", "svg"),
    _L.YAML: ("yaml", "yml"),
}

DISCORD_LANGUAGES: typing.Mapping[str, str] = types.MappingProxyType(
    {alias: language.value for language, aliases in _ALIASES.items() for alias in aliases}
)


def discord_to_pastemyst_language(tag: str) -> str:
    """Translate a Discord code block tag to a PasteMyst language.

    The lookup ignores case and surrounding whitespace. Anything without a
    counterpart, including non-string input, gives ``"Unknown"``.
    """
    if not isinstance(tag, str):
        return PasteMystLanguage.UNKNOWN.value
    return DISCORD_LANGUAGES.get(tag.strip().lower(), PasteMystLanguage.UNKNOWN.value)


def is_known_tag(tag: str) -> bool:
    return discord_to_pastemyst_language(tag) != PasteMystLanguage.UNKNOWN.value
