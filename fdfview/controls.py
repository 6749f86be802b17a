"""Keyboard controls: map key codes to actions and apply them to a view."""

from __future__ import annotations

import math
from enum import Enum
from typing import Optional

from .view import ALPHA, BETA, GAMMA, View

TRANSLATE_STEP = 20
ROTATE_STEP = math.pi / 2 / 9

_HELP_TEXT = (
    "     ---  Key Controls  ----    ",
    "",
    "\t1) View",
    "\t\t\t    [1] for top view",
    "\t\t\t    [2] for side view",
    "\t\t\t    [3] for face view",
    "\t\t\t    [4] for isometric view",
    "\t\t\t    [c] to center the object",
    "",
    "\t2) Translation",
    "\t\t\t    [<- ^ ->] Arrow keys for movement",
    "",
    "\t3) Rotation",
    "\t\t\t    [q] and [e] rotate about the z axis",
    "\t\t\t    [w] and [s] rotate about the x axis",
    "\t\t\t    [a] and [d] rotate about the y axis",
    "",
    "\t4) Zooming",
    "\t\t\t    [+] to zoom in",
    "\t\t\t    [-] to zoom out",
    "",
    "\t5) Wave action",
    "\t\t\t    [.] to move step by step",
    "\t\t\t    [,] to move continuously",
    "",
    "\t6) Exit",
    "\t\t\t    [esc] to exit",
)


class Layout(Enum):
    """The key code set a window system reports."""

    MACOS = "macos"
    LINUX = "linux"


class Action(Enum):
    """What a key press asks for."""

    MOVE_UP = "move_up"
    MOVE_DOWN = "move_down"
    MOVE_LEFT = "move_left"
    MOVE_RIGHT = "move_right"
    CENTER = "center"
    ROTATE_Z_NEG = "rotate_z_neg"
    ROTATE_Z_POS = "rotate_z_pos"
    ROTATE_Y_NEG = "rotate_y_neg"
    ROTATE_Y_POS = "rotate_y_pos"
    ROTATE_X_NEG = "rotate_x_neg"
    ROTATE_X_POS = "rotate_x_pos"
    TOP_VIEW = "top_view"
    SIDE_VIEW = "side_view"
    FACE_VIEW = "face_view"
    ISOMETRIC_VIEW = "isometric_view"
    REDRAW = "redraw"
    ZOOM_IN = "zoom_in"
    ZOOM_OUT = "zoom_out"
    QUIT = "quit"
    STEP = "step"
    RUN = "run"


_TRANSLATIONS = frozenset(
    {Action.MOVE_UP, Action.MOVE_DOWN, Action.MOVE_LEFT, Action.MOVE_RIGHT, Action.CENTER}
)
_ROTATIONS = frozenset(
    {
        Action.ROTATE_Z_NEG,
        Action.ROTATE_Z_POS,
        Action.ROTATE_Y_NEG,
        Action.ROTATE_Y_POS,
        Action.ROTATE_X_NEG,
        Action.ROTATE_X_POS,
        Action.TOP_VIEW,
        Action.SIDE_VIEW,
        Action.FACE_VIEW,
        Action.ISOMETRIC_VIEW,
        Action.REDRAW,
    }
)
_ZOOMS = frozenset({Action.ZOOM_IN, Action.ZOOM_OUT})

_KEYMAPS: dict[Layout, dict[int, Action]] = {
    Layout.MACOS: {
        126: Action.MOVE_UP,
        125: Action.MOVE_DOWN,
        123: Action.MOVE_LEFT,
        124: Action.MOVE_RIGHT,
        8: Action.CENTER,
        14: Action.ROTATE_Z_NEG,
        12: Action.ROTATE_Z_POS,
        0: Action.ROTATE_Y_NEG,
        2: Action.ROTATE_Y_POS,
        1: Action.ROTATE_X_NEG,
        13: Action.ROTATE_X_POS,
        18: Action.TOP_VIEW,
        83: Action.TOP_VIEW,
        19: Action.SIDE_VIEW,
        84: Action.SIDE_VIEW,
        20: Action.FACE_VIEW,
        85: Action.FACE_VIEW,
        21: Action.ISOMETRIC_VIEW,
        86: Action.ISOMETRIC_VIEW,
        69: Action.ZOOM_IN,
        24: Action.ZOOM_IN,
        78: Action.ZOOM_OUT,
        27: Action.ZOOM_OUT,
        53: Action.QUIT,
        47: Action.STEP,
        65: Action.STEP,
        43: Action.RUN,
    },
    Layout.LINUX: {
        65362: Action.MOVE_UP,
        65364: Action.MOVE_DOWN,
        65361: Action.MOVE_LEFT,
        65363: Action.MOVE_RIGHT,
        99: Action.CENTER,
        101: Action.ROTATE_Z_NEG,
        113: Action.ROTATE_Z_POS,
        97: Action.ROTATE_Y_NEG,
        100: Action.ROTATE_Y_POS,
        115: Action.ROTATE_X_NEG,
        119: Action.ROTATE_X_POS,
        49: Action.TOP_VIEW,
        65436: Action.TOP_VIEW,
        50: Action.SIDE_VIEW,
        65433: Action.SIDE_VIEW,
        51: Action.FACE_VIEW,
        65435: Action.FACE_VIEW,
        52: Action.ISOMETRIC_VIEW,
        65430: Action.ISOMETRIC_VIEW,
        65451: Action.ZOOM_IN,
        61: Action.ZOOM_IN,
        65453: Action.ZOOM_OUT,
        45: Action.ZOOM_OUT,
        65307: Action.QUIT,
        65439: Action.STEP,
        46: Action.STEP,
        44: Action.RUN,
    },
}

# Keys inside the rotation block that have no action of their own still redraw.
_REDRAW_RANGES: dict[Layout, tuple[range, ...]] = {
    Layout.MACOS: (range(0, 4), range(12, 22), range(83, 87)),
    Layout.LINUX: (range(97, 120), range(49, 53), range(65430, 65437)),
}


def action_for_key(key: int, layout: Layout = Layout.LINUX) -> Optional[Action]:
    """Return the action bound to ``key`` in ``layout``, or ``None`` if unbound."""
    action = _KEYMAPS[layout].get(key)
    if action is not None:
        return action
    if any(key in block for block in _REDRAW_RANGES[layout]):
        return Action.REDRAW
    return None


def translate(view: View, action: Action, width: int, height: int) -> None:
    """Move the grid by a fixed step, or recentre it in a ``width`` x ``height`` image."""
    if action not in _TRANSLATIONS:
        raise ValueError(f"{action} is not a translation")
    if action is Action.MOVE_UP:
        view.y_trans -= TRANSLATE_STEP
    elif action is Action.MOVE_DOWN:
        view.y_trans += TRANSLATE_STEP
    elif action is Action.MOVE_LEFT:
        view.x_trans -= TRANSLATE_STEP
    elif action is Action.MOVE_RIGHT:
        view.x_trans += TRANSLATE_STEP
    else:
        view.x_trans = width // 2
        view.y_trans = height // 2


def rotate(view: View, action: Action) -> None:
    """Turn the view by a tenth of a right angle, or switch to a preset view."""
    if action not in _ROTATIONS:
        raise ValueError(f"{action} is not a rotation")
    if action is Action.ROTATE_Z_NEG:
        view.alpha -= ROTATE_STEP
    elif action is Action.ROTATE_Z_POS:
        view.alpha += ROTATE_STEP
    elif action is Action.ROTATE_Y_NEG:
        view.beta -= ROTATE_STEP
    elif action is Action.ROTATE_Y_POS:
        view.beta += ROTATE_STEP
    elif action is Action.ROTATE_X_NEG:
        view.gamma -= ROTATE_STEP
    elif action is Action.ROTATE_X_POS:
        view.gamma += ROTATE_STEP
    elif action is Action.ISOMETRIC_VIEW:
        view.alpha, view.beta, view.gamma = ALPHA, BETA, GAMMA
    elif action is Action.TOP_VIEW:
        view.alpha, view.beta, view.gamma = 0.0, 0.0, 0.0
    elif action is Action.SIDE_VIEW:
        view.alpha, view.beta, view.gamma = 0.0, math.pi / 2, math.pi / 2
    elif action is Action.FACE_VIEW:
        view.alpha, view.beta, view.gamma = 0.0, 0.0, math.pi / 2


def zoom(view: View, action: Action, width: int, height: int) -> None:
    """Grow or shrink the point spacing by 10% plus one, keeping the image centre fixed."""
    if action not in _ZOOMS:
        raise ValueError(f"{action} is not a zoom")
    x_unknown = (width / 2.0 - view.x_trans) / view.div
    y_unknown = (height / 2.0 - view.y_trans) / view.div
    if action is Action.ZOOM_IN:
        div = math.trunc(view.div * 1.1 + 1)
    else:
        div = math.trunc(view.div * 0.9 - 1)
    view.div = max(div, 1)
    view.x_trans = math.trunc(width / 2.0 - x_unknown * view.div)
    view.y_trans = math.trunc(height / 2.0 - y_unknown * view.div)


def apply_action(view: View, action: Action, width: int, height: int) -> bool:
    """Apply a view-changing action; return True if the picture must be redrawn.

    Quitting and the wave actions leave the view alone and return False.
    """
    if action in _TRANSLATIONS:
        translate(view, action, width, height)
    elif action in _ROTATIONS:
        rotate(view, action)
    elif action in _ZOOMS:
        zoom(view, action, width, height)
    else:
        return False
    return True


def help_lines() -> list[str]:
    """Return the on-screen help text, one entry per line."""
    return list(_HELP_TEXT)