"""Pure state machines behind the interactive behaviors of generated pages.

The client script emitted by :mod:`pageforge.pipeline.page_generator.behavior`
implements these transitions in the browser. Keeping a Python rendition of
each machine makes the rules testable without a rendering surface and gives
the script a single reference to stay faithful to.

Machines
--------
- Reveal: an element is revealed once and never hidden again.
- Accordion: ``Closed`` or ``Open(i)``; opening an entry closes the others,
  toggling the open entry closes it.
- Carousel: an active index in ``[0, n)`` with modulo navigation.
- Lightbox: ``Closed`` or ``Open(i)``; modulo navigation, closed by the
  close control or the backdrop but never by the image.
- Counter: counts from zero to a target once, on first visibility.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class Closed:
    """No entry is open."""


@dataclass(frozen=True)
class Open:
    """The entry at ``index`` is open."""

    index: int


PanelState = Union[Closed, Open]

CLOSED = Closed()

LIGHTBOX_TARGET_IMAGE = "image"
LIGHTBOX_TARGET_BACKDROP = "backdrop"
LIGHTBOX_TARGET_CLOSE = "close"


def reveal(already_revealed: bool, intersecting: bool) -> bool:
    """Return the revealed flag after a visibility event."""
    return already_revealed or intersecting


def accordion_toggle(state: PanelState, index: int) -> PanelState:
    """Click FAQ entry ``index``.

    Examples
    --------
    >>> accordion_toggle(CLOSED, 2)
    Open(index=2)
    >>> accordion_toggle(Open(2), 0)
    Open(index=0)
    >>> accordion_toggle(Open(0), 0)
    Closed()
    """
    if isinstance(state, Open) and state.index == index:
        return CLOSED
    return Open(index)


def carousel_next(active: int, count: int) -> int:
    """Advance the carousel, wrapping from the last slide to the first."""
    if count <= 0:
        return 0
    return (active + 1) % count


def carousel_previous(active: int, count: int) -> int:
    """Step the carousel back, wrapping from the first slide to the last."""
    if count <= 0:
        return 0
    return (active - 1) % count


def carousel_jump(active: int, target: int, count: int) -> int:
    """Jump to ``target`` via an indicator; out-of-range targets are ignored."""
    if 0 <= target < count:
        return target
    return active


def lightbox_open(index: int) -> PanelState:
    return Open(index)


def lightbox_next(state: PanelState, count: int) -> PanelState:
    """Show the next image, wrapping to the first; no-op when closed."""
    if isinstance(state, Closed) or count <= 0:
        return state
    return Open((state.index + 1) % count)


def lightbox_previous(state: PanelState, count: int) -> PanelState:
    """Show the previous image, wrapping to the last; no-op when closed."""
    if isinstance(state, Closed) or count <= 0:
        return state
    return Open((state.index - 1) % count)


def lightbox_click(state: PanelState, target: str) -> PanelState:
    r"""Apply a click inside the open lightbox overlay.

    Parameters
    ----------
    state : PanelState
        Current lightbox state.
    target : str
        What was clicked: ``"image"``, ``"backdrop"`` or ``"close"``.

    Returns
    -------
    PanelState
        ``Closed`` for the close control or the backdrop; unchanged for the
        image itself.

    Examples
    --------
    >>> lightbox_click(Open(1), "image")
    Open(index=1)
    >>> lightbox_click(Open(1), "backdrop")
    Closed()
    """
    if target in (LIGHTBOX_TARGET_BACKDROP, LIGHTBOX_TARGET_CLOSE):
        return CLOSED
    return state


@dataclass(frozen=True)
class CounterState:
    """Progress of one animated counter."""

    target: int
    started: bool = False


def counter_on_visible(state: CounterState) -> tuple[CounterState, bool]:
    """Handle a visibility event; return the new state and whether to start now."""
    if state.started:
        return state, False
    return CounterState(target=state.target, started=True), True


def counter_value(target: int, progress: float) -> int:
    """Return the number displayed at ``progress`` (0..1) of the animation.

    Examples
    --------
    >>> [counter_value(200, p) for p in (0.0, 0.5, 1.0, 1.5)]
    [0, 100, 200, 200]
    """
    clamped = min(max(progress, 0.0), 1.0)
    if clamped >= 1.0:
        return target
    return int(target * clamped)
