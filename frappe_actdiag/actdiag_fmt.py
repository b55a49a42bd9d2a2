from __future__ import annotations

ACTDIAG_HEADER = "actdiag {"
ACTDIAG_FOOTER = "}"


def ad_text(text: str, *, escape_quotes: bool = False) -> str:
    """Return `text` ready to sit between double quotes.

    Without `escape_quotes` the value is emitted verbatim, so an embedded `"`
    breaks the generated source.
    """
    s = str(text)
    if escape_quotes:
        s = s.replace("\\", "\\\\").replace('"', '\\"')
    return s


def ad_quote(text: str, *, escape_quotes: bool = False) -> str:
    return f'"{ad_text(text, escape_quotes=escape_quotes)}"'


def ad_lane_open(role: str, *, escape_quotes: bool = False) -> str:
    return f"lane {ad_quote(role, escape_quotes=escape_quotes)} {{"


def ad_lane_close() -> str:
    return "}"


def ad_state(name: str, *, escape_quotes: bool = False) -> str:
    return f"\t{ad_quote(name, escape_quotes=escape_quotes)}"


def ad_edge(src: str, dst: str, label: str, *, escape_quotes: bool = False) -> str:
    a = ad_quote(src, escape_quotes=escape_quotes)
    b = ad_quote(dst, escape_quotes=escape_quotes)
    lbl = ad_quote(label, escape_quotes=escape_quotes)
    return f"\t{a} -> {b} [label = {lbl}]"
