"""Text UI layer for keychord."""

from .app import KeyInspectorApp
from .controller import InspectorController, InspectorSnapshot, textual_key_to_event

__all__ = ["InspectorController", "InspectorSnapshot", "KeyInspectorApp", "textual_key_to_event"]
