"""Timeline page layout: ordering, sides, stagger delays and truncation."""

import textwrap
from dataclasses import dataclass

from app.schemas.sobre import SobreDTO

# Animation timings (seconds)
STAGGER = 0.2
ITEM_DURATION = 0.5


@dataclass
class TimelineItem:
    """One rendered timeline entry."""

    index: int
    ano: int
    descricao: str
    image_url: str | None
    side: str
    delay: float
    preview: str
    truncated: bool

    @property
    def drawer_id(self) -> str:
        return f"detalhes-{self.ano}"

    @property
    def image_alt(self) -> str:
        return f"Evento de {self.ano} - Coletivo À Margem"


def wrap_lines(text: str, width: int) -> list[str]:
    """Split text into display lines of at most ``width`` characters."""
    lines: list[str] = []
    for paragraph in text.splitlines() or [""]:
        lines.extend(textwrap.wrap(paragraph, width=width) or [""])
    return lines


def truncate(text: str, rows: int, width: int) -> tuple[str, bool]:
    """
    Clip text to ``rows`` display lines.

    Returns the preview and whether anything was cut off. The preview ends
    with an ellipsis when truncated.
    """
    lines = wrap_lines(text, width)
    if len(lines) <= rows:
        return text, False
    kept = lines[:rows]
    kept[-1] = kept[-1].rstrip()[: max(width - 1, 1)].rstrip() + "…"
    return "\n".join(kept), True


def build_timeline(
    entries: list[SobreDTO],
    rows: int,
    chars_per_line: int,
) -> list[TimelineItem]:
    """Sort entries by year and lay them out as alternating timeline items."""
    items = []
    for index, entry in enumerate(sorted(entries, key=lambda e: e.ano)):
        preview, truncated = truncate(entry.descricao, rows, chars_per_line)
        items.append(
            TimelineItem(
                index=index,
                ano=entry.ano,
                descricao=entry.descricao,
                image_url=entry.image_url,
                side="left" if index % 2 == 0 else "right",
                delay=round(index * STAGGER, 2),
                preview=preview,
                truncated=truncated,
            )
        )
    return items
