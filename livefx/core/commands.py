"""Keyboard command interpreter.

Maps one key code per cycle onto a mutation of :class:`Settings`. Letters
bound in ``STEP_BINDINGS`` step their setting up when typed in lowercase and
down when typed in uppercase; the remaining commands are one-shot actions.
"""

import re
from typing import List

from .settings import Settings


NO_KEY = -1
BACKSPACE = 8
ESCAPE = 27
DELETE = 127
SPACE = ord(" ")

BACKSPACE_KEYS = (BACKSPACE, DELETE)

STEP_BINDINGS = {
    "b": "blur",
    "g": "grayscale",
    "r": "rotate",
    "c": "canny",
    "s": "sobel",
    "k": "mirror_horizontal",
    "l": "mirror_vertical",
    "n": "negative",
}

HELP_TEXT = """\
Commands:
  b / B      blur / undo last blur
  g / G      grayscale / undo grayscale
  r / R      rotate right / rotate left (also stops recording)
  c / C      Canny edges / undo last Canny
  s / S      Sobel gradient / undo last Sobel
  k / K      mirror horizontally / undo
  l / L      mirror vertically / undo
  n / N      negative / undo negative
  [          set brightness to +intensity
  ]          set brightness to -intensity
  ;          set contrast to intensity
  ,          scale down by half (stops recording)
  space      start/stop recording
  backspace  reset everything
  esc        exit
"""

_SCRIPT_TOKENS = {
    "<esc>": ESCAPE,
    "<bs>": BACKSPACE,
    "<space>": SPACE,
}
_SCRIPT_PATTERN = re.compile(r"<esc>|<bs>|<space>|.", re.DOTALL)


def _lower(key: int) -> int:
    if ord("A") <= key <= ord("Z"):
        return key + (ord("a") - ord("A"))
    return key


def _apply_step(settings: Settings, key: int) -> bool:
    char = chr(key)
    name = STEP_BINDINGS.get(char.lower())
    if name is None:
        return False
    if char.islower():
        settings.step(name, +1)
    else:
        settings.step(name, -1)
    return True


def apply_key(settings: Settings, key: int) -> bool:
    """Apply a single key event to the settings.

    Args:
        settings: Settings to mutate.
        key: Key code as returned by ``cv2.waitKey`` (``NO_KEY`` for none).

    Returns:
        True if the key was bound to a command.
    """
    if key < 0 or key > 0x7F:
        return False

    handled = _apply_step(settings, key)

    command = _lower(key)
    if command == ord("r"):
        settings.recording = False
    elif command == ord("["):
        settings.brightness = settings.intensity
    elif command == ord("]"):
        settings.brightness = -settings.intensity
    elif command == ord(";"):
        settings.contrast = settings.intensity
    elif command == ord(","):
        settings.recording = False
        settings.double_scale()
    elif command == SPACE:
        settings.recording = not settings.recording
    elif command in BACKSPACE_KEYS:
        settings.reset()
    elif command == ESCAPE:
        settings.exit_requested = True
    else:
        return handled
    return True


def parse_key_script(text: str) -> List[int]:
    """Convert a command string into key codes.

    Every character is one key; ``<esc>``, ``<bs>`` and ``<space>`` name
    the control keys.

    Args:
        text: Command string, e.g. ``"gbb<space>"``.

    Returns:
        Key codes in order.
    """
    keys = []
    for token in _SCRIPT_PATTERN.findall(text):
        if token in _SCRIPT_TOKENS:
            keys.append(_SCRIPT_TOKENS[token])
        else:
            keys.append(ord(token))
    return keys


def apply_script(settings: Settings, text: str) -> int:
    """Apply every key of a command string in order.

    Returns:
        Number of keys that were bound to a command.
    """
    return sum(apply_key(settings, key) for key in parse_key_script(text))
