"""Per-language lookup tables for the code-line highlighter.

Data only: adding a language means adding a LanguageSpec and its aliases.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class LanguageSpec:
    """Static highlighting rules for one language family.

    ``type_names`` replaces the uppercase-initial type heuristic when set.
    The remaining flags switch on the family-specific token scanners.
    """

    keywords: frozenset[str]
    primitives: frozenset[str] = frozenset()
    comment_prefix: str = "//"
    type_names: frozenset[str] | None = None
    char_literals: bool = False
    attributes: bool = False
    macros: bool = False
    shell_variables: bool = False


def _words(text: str) -> frozenset[str]:
    return frozenset(text.split())


RUST = LanguageSpec(
    keywords=_words("""
        fn let mut pub use mod struct enum impl trait for while loop if else
        match return self Self where async await move ref type const static
        crate super as in true false unsafe extern dyn abstract become box do
        final macro override priv typeof unsized virtual yield union break
        continue
    """),
    primitives=_words("""
        i8 i16 i32 i64 i128 isize u8 u16 u32 u64 u128 usize f32 f64 bool
        char str
    """),
    char_literals=True,
    attributes=True,
    macros=True,
)

PYTHON = LanguageSpec(
    keywords=_words("""
        def class return if elif else for while import from as with try
        except finally raise pass break continue yield lambda and or not in
        is True False None global nonlocal assert del async await self print
    """),
    comment_prefix="#",
)

JAVASCRIPT = LanguageSpec(
    keywords=_words("""
        function const let var return if else for while class new this
        import export from default async await try catch finally throw
        typeof instanceof true false null undefined of in switch case
    """),
)

GO = LanguageSpec(
    keywords=_words("""
        func package import return if else for range struct interface type
        var const defer go chan select case switch default break continue
        map true false nil make append len cap
    """),
    primitives=_words("""
        int int8 int16 int32 int64 uint uint8 uint16 uint32 uint64 uintptr
        float32 float64 complex64 complex128 bool byte rune string error any
    """),
    # exported identifiers are capitalised in Go, so capitals say nothing
    type_names=_words("""
        Reader Writer Closer ReadWriter ReadCloser WriteCloser
        ReadWriteCloser Seeker Context Error Stringer Mutex RWMutex
        WaitGroup Once Pool Map Duration Time Timer Ticker Buffer Builder
        Request Response ResponseWriter Handler HandlerFunc Server Client
        Transport File FileInfo FileMode Decoder Encoder Marshaler
        Unmarshaler Logger Flag Regexp Conn Listener Addr Scanner Token Type
        Value Kind Cmd Signal
    """),
)

JAVA = LanguageSpec(
    keywords=_words("""
        public private protected class interface extends implements return
        if else for while new this import package static final void int
        String boolean true false null try catch throw throws fun val var
        when object companion
    """),
)

SHELL = LanguageSpec(
    keywords=_words("""
        if then else elif fi for while do done case esac function return
        exit echo export local readonly set unset shift source in true false
        read declare typeset trap eval exec test select until break continue
        printf
        go build run fmt vet mod get install clean doc list version env
        generate tool proxy GOPATH GOROOT GOBIN GOMODCACHE GOPROXY GOSUMDB
        cargo new init add remove update check clippy rustfmt rustc rustup
        publish uninstall search tree locate_project metadata audit watch
        expand
    """),
    comment_prefix="#",
    shell_variables=True,
)

C_FAMILY = LanguageSpec(
    keywords=_words("""
        int char float double void long short unsigned signed const static
        extern struct union enum typedef sizeof return if else for while do
        switch case break continue default goto auto register volatile class
        public private protected virtual override template namespace using
        new delete try catch throw nullptr true false this include define
        ifdef ifndef endif
    """),
)

_SQL_WORDS = """
    SELECT FROM WHERE INSERT UPDATE DELETE CREATE DROP ALTER TABLE INDEX
    INTO VALUES SET AND OR NOT NULL JOIN LEFT RIGHT INNER OUTER ON GROUP BY
    ORDER ASC DESC HAVING LIMIT OFFSET UNION AS DISTINCT COUNT SUM AVG MIN
    MAX LIKE IN BETWEEN EXISTS CASE WHEN THEN ELSE END BEGIN COMMIT ROLLBACK
    PRIMARY KEY FOREIGN REFERENCES
"""

SQL = LanguageSpec(
    keywords=_words(_SQL_WORDS) | _words(_SQL_WORDS.lower()),
    comment_prefix="--",
)

YAML = LanguageSpec(
    keywords=_words("true false null yes no on off"),
    comment_prefix="#",
)

TOML = LanguageSpec(
    keywords=_words("""
        true false name version edition authors dependencies
        dev-dependencies build-dependencies features workspace members
        exclude include path git branch tag rev package lib bin example test
        bench doc profile release debug opt-level lto codegen-units panic
        strip default optional repository homepage documentation license
        license-file keywords categories readme description resolver
    """),
    comment_prefix="#",
)

CSS = LanguageSpec(
    keywords=_words("""
        color background border margin padding display position width
        height font text flex grid align justify important none auto inherit
        initial unset
    """),
    comment_prefix="/*",
)

DOCKERFILE = LanguageSpec(
    keywords=_words("""
        FROM RUN CMD LABEL EXPOSE ENV ADD COPY ENTRYPOINT VOLUME USER WORKDIR
        ARG ONBUILD STOPSIGNAL HEALTHCHECK SHELL AS
    """),
    comment_prefix="#",
    shell_variables=True,
)

RUBY = LanguageSpec(
    keywords=_words("""
        def end class module if elsif else unless while until for do begin
        rescue ensure raise return yield require include attr self true
        false nil puts print
    """),
    comment_prefix="#",
)

GENERIC = LanguageSpec(
    keywords=_words("""
        fn function def class return if else for while import export const
        let var true false null nil None self this
    """),
)

LANGUAGES: dict[str, LanguageSpec] = {
    "rust": RUST, "rs": RUST,
    "python": PYTHON, "py": PYTHON,
    "javascript": JAVASCRIPT, "js": JAVASCRIPT, "typescript": JAVASCRIPT,
    "ts": JAVASCRIPT, "jsx": JAVASCRIPT, "tsx": JAVASCRIPT,
    "go": GO, "golang": GO,
    "java": JAVA, "kotlin": JAVA, "kt": JAVA,
    "sh": SHELL, "bash": SHELL, "zsh": SHELL, "shell": SHELL,
    "c": C_FAMILY, "cpp": C_FAMILY, "c++": C_FAMILY, "h": C_FAMILY,
    "hpp": C_FAMILY,
    "sql": SQL,
    "yaml": YAML, "yml": YAML,
    "toml": TOML,
    "css": CSS, "scss": CSS, "less": CSS,
    "dockerfile": DOCKERFILE, "docker": DOCKERFILE,
    "ruby": RUBY, "rb": RUBY,
}


def lookup_language(tag: str) -> LanguageSpec:
    """Rules for a language tag (case-insensitive); unknown tags get GENERIC."""
    return LANGUAGES.get(tag.strip().lower(), GENERIC)
