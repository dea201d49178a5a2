# src/flappy_remix/ui/input.py
#
# Normalized input snapshot handed to the core per call.
# Whoever reads the devices (keyboard, pointer, touch) owns and updates it.

from dataclasses import dataclass


@dataclass
class InputState:
    flap_held: bool = False

    def press(self):
        self.flap_held = True

    def release(self):
        self.flap_held = False
