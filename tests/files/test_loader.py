# epv:header:start
#
#   project      : EPV
#   file         : test_loader.py
#   file_relpath : tests/files/test_loader.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# epv:header:end

"""Unit tests for `epv.files.loader.FileLoader`.

The loader is exercised through `classify()` (pure, returns diagnostics) and
`load_file()` (emits into a `MessageCollector`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from epv.diagnostic.model import DiagnosticLevel
from epv.filetypes.base import ClassifiedFile, FileTypeTag, TypeFlag
from tests.conftest import make_loader, parametrize

if TYPE_CHECKING:
    from epv.diagnostic.collector import MessageCollector
    from epv.diagnostic.model import Diagnostic
    from epv.files.loader import FileLoader


def _levels(diagnostics: tuple[Diagnostic, ...]) -> list[DiagnosticLevel]:
    return [d.level for d in diagnostics]


# --- No extension -----------------------------------------------------------


@parametrize("name", ["README", "readme", "ReadMe"])
def test_readme_without_extension_is_plain_and_silent(loader: FileLoader, name: str) -> None:
    """An extensionless README is plain text and raises nothing."""
    outcome = loader.classify(name)

    assert outcome.file == ClassifiedFile(name, FileTypeTag.PLAIN)
    assert outcome.diagnostics == ()


@parametrize("name", ["Changelog", "LICENSE", "Makefile"])
def test_other_extensionless_files_get_a_notice(loader: FileLoader, name: str) -> None:
    """Any other extensionless file is plain text with one notice."""
    outcome = loader.classify(name)

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.PLAIN
    assert _levels(outcome.diagnostics) == [DiagnosticLevel.NOTICE]
    assert outcome.diagnostics[0].message == f"The file {name} has no valid extension."


def test_readme_check_uses_the_basename(loader: FileLoader) -> None:
    """A README in a subdirectory is still recognized as README."""
    outcome = loader.classify("docs/README")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.PLAIN
    assert outcome.diagnostics == ()


# --- One dot ----------------------------------------------------------------


@parametrize(
    "name, expected",
    [
        ("index.html", FileTypeTag.HTML),
        ("index.htm", FileTypeTag.HTML),
        ("config.json", FileTypeTag.JSON),
        ("composer.json", FileTypeTag.COMPOSER),
        ("Composer.JSON", FileTypeTag.COMPOSER),
        ("routing.yml", FileTypeTag.YML),
        ("services.yml", FileTypeTag.SERVICE),
        ("notes.txt", FileTypeTag.PLAIN),
        ("CHANGELOG.md", FileTypeTag.PLAIN),
        (".htaccess", FileTypeTag.PLAIN),
        (".gitattributes", FileTypeTag.PLAIN),
        (".gitignore", FileTypeTag.PLAIN),
        ("build.sh", FileTypeTag.PLAIN),
        ("phpunit.xml", FileTypeTag.XML),
        ("app.js", FileTypeTag.JAVASCRIPT),
        ("styles.css", FileTypeTag.CSS),
        ("style.CSS", FileTypeTag.CSS),
        ("icon.gif", FileTypeTag.IMAGE),
        ("icon.png", FileTypeTag.IMAGE),
        ("photo.jpg", FileTypeTag.IMAGE),
        ("photo.JPEG", FileTypeTag.IMAGE),
        ("composer.lock", FileTypeTag.LOCK),
        ("ext.php", FileTypeTag.PHP),
    ],
)
def test_single_extension_table(loader: FileLoader, name: str, expected: FileTypeTag) -> None:
    """Recognized extensions map to their tag without diagnostics."""
    outcome = loader.classify(name)

    assert outcome.file is not None
    assert outcome.file.file_type is expected
    assert outcome.diagnostics == ()
    assert outcome.attempts == (name.split(".")[1],)


def test_unknown_extension_falls_back_to_binary(loader: FileLoader) -> None:
    """Strict lookup of an unknown extension warns and yields binary."""
    outcome = loader.classify("archive.zip")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.BINARY
    assert _levels(outcome.diagnostics) == [DiagnosticLevel.WARNING]
    assert outcome.diagnostics[0].message == (
        "Can't detect the file type for archive.zip, handling it as a binary file."
    )


def test_swf_is_binary_with_gpl_notice(loader: FileLoader) -> None:
    """SWF files are binary and remind the author to ship the sources."""
    outcome = loader.classify("assets/player.swf")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.BINARY
    assert _levels(outcome.diagnostics) == [DiagnosticLevel.NOTICE]
    assert "player.swf" in outcome.diagnostics[0].message
    assert "GPL" in outcome.diagnostics[0].message


def test_ds_store_is_binary_with_error(loader: FileLoader) -> None:
    """OS X artifacts are binary and must be removed before submission."""
    outcome = loader.classify("styles/.DS_Store")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.BINARY
    assert _levels(outcome.diagnostics) == [DiagnosticLevel.ERROR]
    assert "styles/.DS_Store" in outcome.diagnostics[0].message


# --- Directory-sensitive PHP rule ------------------------------------------


def test_php_under_language_is_lang(loader: FileLoader) -> None:
    """PHP files in the language directory carry both PHP and LANG flags."""
    outcome = loader.classify("language/en/common.php")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.LANG
    assert outcome.file.has_flag(TypeFlag.PHP)
    assert outcome.file.has_flag(TypeFlag.LANG)


def test_php_elsewhere_is_php_only(loader: FileLoader) -> None:
    """PHP files outside the language directory are plain PHP."""
    outcome = loader.classify("includes/common.php")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.PHP
    assert outcome.file.has_flag(TypeFlag.PHP)
    assert not outcome.file.has_flag(TypeFlag.LANG)


@parametrize(
    "base_dir, path, expected",
    [
        ("/srv/ext", "/srv/ext/language/en/common.php", FileTypeTag.LANG),
        ("/srv/ext/", "/srv/ext/Language/en/common.php", FileTypeTag.LANG),
        ("/srv/ext", "/srv/ext/includes/language/common.php", FileTypeTag.PHP),
        ("/srv/ext", "/srv/ext/common.php", FileTypeTag.PHP),
        ("/srv/ext", "language/en/common.php", FileTypeTag.LANG),
        ("/srv/language", "/srv/language/acp/main.php", FileTypeTag.PHP),
        ("vendor/ext", "vendor/ext/language/de/info.php", FileTypeTag.LANG),
    ],
)
def test_language_rule_is_relative_to_base_dir(
    base_dir: str, path: str, expected: FileTypeTag
) -> None:
    """Only the first directory segment below the base directory counts."""
    outcome = make_loader(base_dir=base_dir).classify(path)

    assert outcome.file is not None
    assert outcome.file.file_type is expected


def test_language_directory_name_alone_is_not_lang(loader: FileLoader) -> None:
    """A file named after the language directory is not a language file."""
    outcome = loader.classify("language.php")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.PHP


# --- Two dots ---------------------------------------------------------------


def test_two_dots_prefers_inner_extension(loader: FileLoader) -> None:
    """`phpunit-test.xml.all` resolves on `xml` and never reaches `all`."""
    outcome = loader.classify("phpunit-test.xml.all")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.XML
    assert outcome.diagnostics == ()
    assert outcome.attempts == ("xml",)


def test_two_dots_falls_back_to_last_extension(loader: FileLoader) -> None:
    """An unknown inner extension is skipped silently; the last one decides."""
    outcome = loader.classify("jquery.min.js")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.JAVASCRIPT
    assert outcome.diagnostics == ()
    assert outcome.attempts == ("min", "js")


def test_two_unknown_extensions_warn_once(loader: FileLoader) -> None:
    """Only the strict second attempt raises the binary warning."""
    outcome = loader.classify("backup.tar.gz")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.BINARY
    assert _levels(outcome.diagnostics) == [DiagnosticLevel.WARNING]
    assert "backup.tar.gz" in outcome.diagnostics[0].message


def test_two_dots_inner_special_case_keeps_its_diagnostic(loader: FileLoader) -> None:
    """A rule diagnostic raised on the inner extension is kept."""
    outcome = loader.classify("movie.swf.old")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.BINARY
    assert _levels(outcome.diagnostics) == [DiagnosticLevel.NOTICE]


# --- Three or more dots -----------------------------------------------------


def test_too_many_dots_uses_last_segment(loader: FileLoader) -> None:
    """Three dots raise an error, then the last segment decides strictly."""
    outcome = loader.classify("archive.tar.gz.bak")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.BINARY
    assert _levels(outcome.diagnostics) == [DiagnosticLevel.ERROR, DiagnosticLevel.WARNING]
    assert outcome.diagnostics[0].message == (
        "File (archive.tar.gz.bak) seems to have too many dots. Using the last part as extension."
    )
    assert outcome.attempts == ("bak",)


def test_too_many_dots_with_known_last_segment(loader: FileLoader) -> None:
    """The error is raised even when the last segment is recognized."""
    outcome = loader.classify("a.b.c.d.css")

    assert outcome.file is not None
    assert outcome.file.file_type is FileTypeTag.CSS
    assert _levels(outcome.diagnostics) == [DiagnosticLevel.ERROR]


# --- Fatal ------------------------------------------------------------------


@parametrize("path", ["", "styles/", "language/en/"])
def test_empty_basename_is_fatal(loader: FileLoader, path: str) -> None:
    """Nothing to classify: no file and exactly one fatal diagnostic."""
    outcome = loader.classify(path)

    assert outcome.file is None
    assert not outcome.ok
    assert _levels(outcome.diagnostics) == [DiagnosticLevel.FATAL]
    assert outcome.diagnostics[0].message == "Filename was empty"
    assert outcome.diagnostics[0].is_blocking


# --- Emission ---------------------------------------------------------------


def test_load_file_emits_in_order(loader: FileLoader, sink: MessageCollector) -> None:
    """Diagnostics reach the sink in the order they were raised."""
    file = loader.load_file("archive.tar.gz.bak", sink)

    assert file is not None
    assert [d.level for d in sink.for_path("archive.tar.gz.bak")] == [
        DiagnosticLevel.ERROR,
        DiagnosticLevel.WARNING,
    ]
    assert all(d.blocks_clean_exit for d in sink)
    assert sink.debug_lines == ()


def test_load_file_returns_none_on_fatal(loader: FileLoader, sink: MessageCollector) -> None:
    """A fatal path returns None and reports once."""
    assert loader.load_file("src/", sink) is None
    assert [d.level for d in sink] == [DiagnosticLevel.FATAL]
    assert sink.has_blocking()


def test_debug_mode_writes_trace_lines(sink: MessageCollector) -> None:
    """In debug mode every attempted extension is traced, and files carry the flag."""
    loader = make_loader(debug=True)

    file = loader.load_file("jquery.min.js", sink)

    assert file == ClassifiedFile("jquery.min.js", FileTypeTag.JAVASCRIPT, debug=True)
    assert sink.debug_lines == (
        "Attempting to load jquery.min.js with extension min",
        "Attempting to load jquery.min.js with extension js",
    )


def test_debug_flag_does_not_change_the_decision() -> None:
    """Debug only rides along on the result."""
    plain = make_loader().classify("services.yml")
    debug = make_loader(debug=True).classify("services.yml")

    assert plain.file is not None and debug.file is not None
    assert plain.file.file_type is debug.file.file_type
    assert plain.diagnostics == debug.diagnostics


def test_load_files_skips_fatal_paths(loader: FileLoader, sink: MessageCollector) -> None:
    """A fatal for one path does not stop the others."""
    files = loader.load_files(["composer.json", "broken/", "README"], sink)

    assert [f.file_type for f in files] == [FileTypeTag.COMPOSER, FileTypeTag.PLAIN]
    assert [d.path for d in sink] == ["broken/"]


def test_classification_is_idempotent(loader: FileLoader) -> None:
    """Same inputs give equal results and the same diagnostics."""
    paths = ["archive.tar.gz.bak", "language/en/common.php", "Changelog", "x/"]

    first = [loader.classify(p) for p in paths]
    second = [loader.classify(p) for p in paths]

    assert first == second


def test_load_file_is_idempotent(sink: MessageCollector) -> None:
    """Loading twice emits the same diagnostics twice."""
    loader = make_loader(base_dir="/srv/ext", debug=True)

    a = loader.load_file("/srv/ext/movie.swf", sink)
    b = loader.load_file("/srv/ext/movie.swf", sink)

    assert a == b
    first, second = sink.for_path("/srv/ext/movie.swf")
    assert first == second
