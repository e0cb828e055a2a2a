"""
Turtle Interpreter

Folds a parsed command list into turtle state, emitting a stroked path
object for every pen-down move. Semantic anomalies (popping an empty
stack, a command type with no handler) never abort the run; they are
recorded as diagnostic flags next to the scene.
"""

import logging
import math
from collections.abc import Callable, Iterable
from dataclasses import dataclass

from turtlescene.config import TRACE
from turtlescene.geometry.stroke import stroke_segment
from turtlescene.program import commands as cmd
from turtlescene.scene.diagnostics import DiagnosticFlag, DiagnosticFlags
from turtlescene.scene.scene import ObjectId, PathObjectKind, Scene, SceneBuilder

from .state import TurtleState

logger = logging.getLogger(__name__)


@dataclass
class CompileResult:
    """Finished scene plus the diagnostics raised while building it"""

    scene: Scene
    diagnostics: DiagnosticFlags

    @property
    def ok(self) -> bool:
        return not self.diagnostics


class TurtleInterpreter:
    """Sequential turtle state machine producing a Scene"""

    def __init__(self):
        self.state = TurtleState()
        self.builder = SceneBuilder()
        self.diagnostics = DiagnosticFlags()
        self.commands_processed = 0

        # Every Command subclass must appear here; anything else is flagged
        self._handlers: dict[type, Callable] = {
            cmd.Reset: self._reset,
            cmd.PenUp: self._pen_up,
            cmd.PenDown: self._pen_down,
            cmd.Turn: self._turn,
            cmd.Direction: self._direction,
            cmd.Move: self._move,
            cmd.PushLoc: self._push_loc,
            cmd.PopLoc: self._pop_loc,
            cmd.PushRot: self._push_rot,
            cmd.PopRot: self._pop_rot,
            cmd.Go: self._go,
            cmd.GoX: self._go_x,
            cmd.GoY: self._go_y,
            cmd.PenWidth: self._pen_width,
            cmd.PenColor: self._pen_color,
        }

    @property
    def scene(self) -> Scene:
        return self.builder.scene

    def run(self, program: Iterable[cmd.Command]) -> CompileResult:
        """
        Interpret a complete program

        Args:
            program: Commands in execution order

        Returns:
            CompileResult with the finished scene and diagnostics
        """
        for command in program:
            self.process(command)
        return self.finish()

    def process(self, command: cmd.Command) -> None:
        """Apply a single command to the turtle state"""
        self.commands_processed += 1
        handler = self._handlers.get(type(command))
        if handler is None:
            self._raise_flag(DiagnosticFlag.UNHANDLED_COMMAND, command)
            return
        logger.log(TRACE, f"#{self.commands_processed} {command}")
        handler(command)

    def finish(self) -> CompileResult:
        scene = self.builder.finish()
        logger.debug(
            f"Interpreted {self.commands_processed} commands: "
            f"{len(scene.objects)} objects, {len(scene.paints)} paints"
        )
        return CompileResult(scene, self.diagnostics)

    def _raise_flag(self, flag: DiagnosticFlag, command: object) -> None:
        logger.debug(f"{flag.value} at command #{self.commands_processed} ({command!r})")
        self.diagnostics.set(flag)

    def _line_to(self, x: float, y: float) -> ObjectId:
        paint = self.builder.register_paint(self.state.pen_color)
        outline = stroke_segment(self.state.position, (x, y), self.state.pen_width)
        return self.builder.add_path_object(outline, paint, PathObjectKind.STROKE)

    # ----- Command handlers -----

    def _reset(self, _: cmd.Reset) -> None:
        self.state = TurtleState()
        self.builder.reset()
        self.diagnostics.clear()

    def _pen_up(self, _: cmd.PenUp) -> None:
        self.state.pen_down = False

    def _pen_down(self, _: cmd.PenDown) -> None:
        self.state.pen_down = True

    def _turn(self, command: cmd.Turn) -> None:
        self.state.turn(command.degrees)

    def _direction(self, command: cmd.Direction) -> None:
        self.state.set_direction(command.degrees)

    def _move(self, command: cmd.Move) -> None:
        rad = math.radians(self.state.heading)
        to_x = self.state.x + command.distance * math.cos(rad)
        to_y = self.state.y + command.distance * math.sin(rad)

        if self.state.pen_down:
            self._line_to(to_x, to_y)
            self.builder.extend_bounds((to_x, to_y))

        self.state.position = (to_x, to_y)

    def _push_loc(self, _: cmd.PushLoc) -> None:
        self.state.push_location()

    def _pop_loc(self, command: cmd.PopLoc) -> None:
        if not self.state.pop_location():
            self._raise_flag(DiagnosticFlag.POPLOC_ON_EMPTY_STACK, command)

    def _push_rot(self, _: cmd.PushRot) -> None:
        self.state.push_rotation()

    def _pop_rot(self, command: cmd.PopRot) -> None:
        if not self.state.pop_rotation():
            self._raise_flag(DiagnosticFlag.POPROT_ON_EMPTY_STACK, command)

    def _go(self, command: cmd.Go) -> None:
        self.state.position = (command.x, command.y)
        self.builder.extend_bounds(self.state.position)

    def _go_x(self, command: cmd.GoX) -> None:
        self.state.x = command.x
        self.builder.extend_bounds(self.state.position)

    def _go_y(self, command: cmd.GoY) -> None:
        self.state.y = command.y
        self.builder.extend_bounds(self.state.position)

    def _pen_width(self, command: cmd.PenWidth) -> None:
        self.state.pen_width = command.width

    def _pen_color(self, command: cmd.PenColor) -> None:
        self.state.pen_color = command.rgb
