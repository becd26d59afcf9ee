"""Input handling for Archery Pop."""

from games.ArcheryPop.input.input_event import InputAction, InputEvent
from games.ArcheryPop.input.pygame_source import PygameInputSource, clamp
from games.ArcheryPop.input.bindings import apply_input

__all__ = [
    'InputAction',
    'InputEvent',
    'PygameInputSource',
    'clamp',
    'apply_input',
]
