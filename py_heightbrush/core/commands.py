"""
Command dispatch for brush actions.

Hosts sample a ``BrushInput`` per pointer event, pick a ``BrushAction`` and
hand both to ``dispatch`` together with the current ``BrushState``. The only
value carried between invocations is the last sampled height, which the
flatten action paints with; it is returned explicitly rather than kept on
the editor.
"""

import math
from dataclasses import dataclass, replace
from typing import Dict, Optional, Tuple

from ..config.brush_settings import BrushAction, BrushSettings
from ..utils.logging_config import get_logger
from .coordinates import WorldPosition
from .editor import HeightmapEditor

logger = get_logger(__name__)


@dataclass(frozen=True)
class BrushInput:
    """One pointer event as seen by the brush core."""

    hit_point: Optional[WorldPosition] = None
    pointer_delta: Tuple[float, float] = (0.0, 0.0)

    @property
    def has_hit(self) -> bool:
        if self.hit_point is None:
            return False
        p = self.hit_point
        return math.isfinite(p.x) and math.isfinite(p.y) and math.isfinite(p.z)


@dataclass(frozen=True)
class BrushState:
    """Values threaded from one brush invocation to the next."""

    sampled_height: float = 0.0


class BrushCommand:
    """Base class for a brush action."""

    action: BrushAction

    def execute(
        self,
        editor: HeightmapEditor,
        brush_input: BrushInput,
        state: BrushState,
        settings: BrushSettings,
    ) -> BrushState:
        raise NotImplementedError


class FlattenCommand(BrushCommand):
    """Paint the last sampled height under the brush."""

    action = BrushAction.FLATTEN

    def execute(self, editor, brush_input, state, settings):
        editor.flatten_region(
            brush_input.hit_point, state.sampled_height, settings.width, settings.height
        )
        return state


class FlattenAllCommand(BrushCommand):
    """Reset the whole terrain to the session's base height."""

    action = BrushAction.FLATTEN_ALL

    def execute(self, editor, brush_input, state, settings):
        editor.flatten_all(settings.base_height)
        return state


class SampleCommand(BrushCommand):
    """Pick up the height under the pointer."""

    action = BrushAction.SAMPLE

    def execute(self, editor, brush_input, state, settings):
        height = editor.sample_point(brush_input.hit_point)
        if height is None:
            return state
        return replace(state, sampled_height=height)


class SampleAverageCommand(BrushCommand):
    """Pick up the average height under the brush."""

    action = BrushAction.SAMPLE_AVERAGE

    def execute(self, editor, brush_input, state, settings):
        height = editor.sample_area_average(
            brush_input.hit_point, settings.width, settings.height
        )
        if height is None:
            return state
        return replace(state, sampled_height=height)


class CircularBrushCommand(BrushCommand):
    """Paint the eased circular brush while the pointer moves."""

    action = BrushAction.CIRCULAR_BRUSH

    def execute(self, editor, brush_input, state, settings):
        editor.apply_circular_brush(
            brush_input.hit_point,
            settings.width,
            settings.height,
            pointer_delta=brush_input.pointer_delta,
            falloff=settings.falloff,
        )
        return state


COMMANDS: Dict[BrushAction, BrushCommand] = {
    command.action: command
    for command in (
        FlattenCommand(),
        FlattenAllCommand(),
        SampleCommand(),
        SampleAverageCommand(),
        CircularBrushCommand(),
    )
}


def command_for(action: BrushAction) -> BrushCommand:
    """Get the command implementing ``action``."""
    return COMMANDS[BrushAction(action)]


def dispatch(
    editor: HeightmapEditor,
    action: BrushAction,
    brush_input: BrushInput,
    state: BrushState,
    settings: Optional[BrushSettings] = None,
) -> BrushState:
    """
    Run one brush invocation.

    Args:
        editor: Editor bound to the target heightmap
        action: Selected brush action
        brush_input: Pointer event for this invocation
        state: State returned by the previous invocation
        settings: Brush settings, defaults to the editor's

    Returns:
        State to pass to the next invocation
    """
    if not brush_input.has_hit:
        return state

    settings = settings or editor.settings
    command = command_for(action)
    return command.execute(editor, brush_input, state, settings)


class BrushSession:
    """
    Convenience wrapper holding an editor, its settings and the current state.

    Hosts that prefer not to thread ``BrushState`` themselves can keep one
    session per edited terrain.
    """

    def __init__(self, editor: HeightmapEditor, settings: Optional[BrushSettings] = None):
        self.editor = editor
        self.settings = settings or editor.settings
        self.state = BrushState()

    def start(self) -> None:
        """Flatten the terrain to the configured base height."""
        logger.info(
            "Starting brush session",
            brush_size=self.settings.brush_size,
            base_height=self.settings.base_height,
        )
        self.editor.flatten_all(self.settings.base_height)

    def handle(self, brush_input: BrushInput, action: Optional[BrushAction] = None) -> BrushState:
        """Dispatch one pointer event with ``action`` or the default action."""
        action = action or self.settings.default_action
        self.state = dispatch(self.editor, action, brush_input, self.state, self.settings)
        return self.state
