"""Link extraction pipeline: resolve, scan, classify, collect, format."""

from __future__ import annotations

from dataclasses import dataclass

from linklist.classify import LinkKind, classify_all, file_pass, kind_of, page_pass
from linklist.errors import NoLinksFoundError
from linklist.format import DisplayMode, format_link
from linklist.linkset import collect
from linklist.origin import resolve_base_path, resolve_origin
from linklist.scan import scan


@dataclass(frozen=True)
class LinkSelection:
    """Which kinds of links to keep.

    ``file_type`` of None skips the file pass; ``"all"`` keeps every file,
    anything else keeps files with that extension only.
    """

    include_pages: bool = True
    file_type: str | None = None

    @property
    def include_files(self) -> bool:
        return self.file_type is not None

    @classmethod
    def from_file_type(cls, file_type: str | None) -> LinkSelection:
        """Selection for a ``--file-type`` value.

        No value lists pages, ``all`` lists pages and every file, an extension
        lists only files of that type.
        """
        if file_type is None:
            return cls(include_pages=True)
        if file_type.strip().lower() == "all":
            return cls(include_pages=True, file_type="all")
        return cls(include_pages=False, file_type=file_type)


@dataclass(frozen=True)
class LinkEntry:
    """A collected link ready for display."""

    text: str
    path: str
    kind: LinkKind

    @property
    def is_directory(self) -> bool:
        return self.path.endswith("/")


def extract_links(
    html: str,
    source_url: str,
    selection: LinkSelection | None = None,
    display_mode: DisplayMode = DisplayMode.ABSOLUTE,
) -> list[LinkEntry]:
    """List the same-origin links of an HTML document.

    Args:
        html: Document text
        source_url: URL the document was fetched from
        selection: Page and/or file passes to run (default: pages only)
        display_mode: Absolute URLs or paths as found

    Raises:
        MalformedUrlError: ``source_url`` has no usable scheme/host
        NoLinksFoundError: nothing survived classification and selection
    """
    selection = selection or LinkSelection()
    origin = resolve_origin(source_url)
    base = resolve_base_path(source_url)

    classified = list(classify_all(scan(html), origin))
    selected = []
    if selection.include_pages:
        selected.extend(page_pass(classified))
    if selection.include_files:
        selected.extend(file_pass(classified, selection.file_type))

    paths = collect(selected)
    if not paths:
        raise NoLinksFoundError()

    return [
        LinkEntry(
            text=format_link(path, base, origin, display_mode),
            path=path,
            kind=kind_of(path),
        )
        for path in paths
    ]
