from typing import List, Callable
from dataclasses import dataclass, field

# One fixed tick; receives the frame time in seconds for scenes that want it
UpdateFn = Callable[[float], None]


@dataclass
class Scene:
    updaters: List[UpdateFn] = field(default_factory=list)

    def update(self, dt: float):
        for fn in self.updaters:
            fn(dt)

    # Optional per-event handler (scenes can override)
    def handle_event(self, event) -> None:
        pass

    # Scenes own their full render pipeline (projection, textures, HUD)
    def render(self, text=None) -> None:  # pragma: no cover - visual
        pass

    # Called once when the window closes, before pygame shuts down
    def shutdown(self) -> None:
        pass
