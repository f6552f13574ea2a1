"""Filter options derived from "<facet>:<value>" tags, and the filter itself."""

from dataclasses import dataclass

from .config import FACET_PREFIXES
from .media import ImageRecord

FACETS = tuple(p.rstrip(":") for p in FACET_PREFIXES)   # ("camera", "film", "theme")


@dataclass(frozen=True)
class FacetOptions:
    camera: list[str]
    film: list[str]
    theme: list[str]

    def items(self):
        return [("camera", self.camera), ("film", self.film), ("theme", self.theme)]


def extract_facet(images: list[ImageRecord], prefix: str) -> list[str]:
    """Every distinct tag starting with ``prefix`` (case-insensitive), sorted.

    Tags keep their original casing; "camera:Canon A1" and "camera:canon a1"
    are two options.
    """
    prefix = prefix.lower()
    found = set()
    for img in images:
        for tag in img.tags:
            if tag.lower().startswith(prefix):
                found.add(tag)
    return sorted(found)


def facet_options(images: list[ImageRecord]) -> FacetOptions:
    return FacetOptions(*(extract_facet(images, prefix) for prefix in FACET_PREFIXES))


def option_label(tag: str, prefix: str) -> str:
    """Display text for a select option: the tag with its prefix removed."""
    if tag.lower().startswith(prefix.lower()):
        return tag[len(prefix):]
    return tag


def filter_images(images: list[ImageRecord], selections: dict[str, str] | None = None) -> list[ImageRecord]:
    """Images whose tags contain every non-empty selection.

    ``selections`` maps "camera" / "film" / "theme" to a full tag string
    (e.g. "theme:Golden Hour"). Matching is case-insensitive exact tag
    equality; slots are ANDed. Order is preserved.
    """
    selections = selections or {}
    unknown = set(selections) - set(FACETS)
    if unknown:
        raise ValueError(f"Unknown facet(s): {', '.join(sorted(unknown))}")

    wanted = [v.lower() for v in selections.values() if v]
    if not wanted:
        return list(images)

    result = []
    for img in images:
        tags = {t.lower() for t in img.tags}
        if all(w in tags for w in wanted):
            result.append(img)
    return result


def visible_images(images: list[ImageRecord], selections: dict[str, str] | None = None) -> list[ImageRecord]:
    """What the grid shows: the filtered set, or everything when nothing matches."""
    return filter_images(images, selections) or list(images)
