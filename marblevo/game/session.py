from __future__ import annotations

from loguru import logger

from marblevo.config.handler import ConfigurationHandler
from marblevo.evolution.engine.controller import GenerationController
from marblevo.evolution.engine.metrics import GenerationStats
from marblevo.evolution.engine.state import ControllerState
from marblevo.evolution.random_source import DefaultRandomSource, RandomSource
from marblevo.exceptions import MarbleEvoError
from marblevo.game.level import (
    build_goal,
    build_human_marble,
    build_initial_population,
    build_world,
    launch_from_drag,
)
from marblevo.game.scoreboard import Scoreboard
from marblevo.game.states import AIModeState, HumanModeState
from marblevo.simulation.geometry import Coordinate, Goal
from marblevo.simulation.kinematic import KinematicBody, KinematicWorld


class GameSession:
    """
    One running level, driven frame by frame through `update()`.

    In AI mode the session launches an iteration whenever one is ready and
    lets the generation controller finish it once every marble has stopped.
    In human mode a single marble is launched by a drag gesture and each
    stopped launch counts as a try.
    """

    def __init__(
        self,
        handler: ConfigurationHandler,
        level_number: int = 0,
        rng: RandomSource | None = None,
    ):
        self.handler = handler
        self.level_number = level_number
        self._rng = rng
        self.scoreboard = Scoreboard()

        self.world: KinematicWorld | None = None
        self.goal: Goal | None = None
        self.controller: GenerationController | None = None
        self.marble: KinematicBody | None = None

        self.ai_state = AIModeState.INACTIVE
        self.human_state = HumanModeState.INACTIVE

        self.create()

    @property
    def human_mode(self) -> bool:
        return self.handler.is_human_mode()

    def create(self) -> None:
        """(Re)build the level from the active configuration."""
        level = self.handler.get_level(self.level_number)
        settings = self.handler.config
        ga_config = self.handler.get_genetic_algorithm()

        self.scoreboard.reset()
        self.world = build_world(settings.world, level)
        self.goal = build_goal(level)
        self.ai_state = AIModeState.INACTIVE
        self.human_state = HumanModeState.INACTIVE
        self.controller = None
        self.marble = None

        if self.human_mode:
            self.marble = build_human_marble(self.world, level)
        else:
            rng = self._rng or DefaultRandomSource(ga_config.seed)
            self.controller = GenerationController(ga_config, rng=rng)
            self._populate()

        logger.info(
            "[GameSession] Level '{}' created ({} mode)",
            level.name,
            "human" if self.human_mode else "AI",
        )

    def restart(self) -> None:
        """Apply staged configuration changes and rebuild the level."""
        self.handler.apply_changes()
        self.create()

    def _populate(self) -> None:
        level = self.handler.get_level(self.level_number)
        population = build_initial_population(
            self.world,
            level,
            self.goal,
            self.handler.get_genetic_algorithm().individual_count,
            self.controller.rng,
        )
        self.controller.initialize_algorithm(population)

    def update(self, dt: float = 1.0) -> GenerationStats | None:
        """Advance one frame. Returns the stats of a generation finished on this frame."""
        self.world.step(dt)
        if self.human_mode:
            self._update_human()
            return None
        return self._update_ai()

    # AI mode

    def toggle_ai(self) -> None:
        """First call launches the evolution, second call kills the population."""
        if self.ai_state is AIModeState.INACTIVE:
            if not self.controller.population:
                self._populate()
            self.ai_state = AIModeState.NEW_ITERATION_READY
            logger.info("[GameSession] AI launched")
        else:
            self.controller.kill_all()
            self.ai_state = AIModeState.INACTIVE
            logger.info("[GameSession] AI stopped")

    def _update_ai(self) -> GenerationStats | None:
        if self.controller is None:
            raise MarbleEvoError("AI update requested without a generation controller")

        if self.ai_state is AIModeState.NEW_ITERATION_READY:
            self.controller.start_iteration()
            self.ai_state = AIModeState.LAUNCHED
            return None

        if self.ai_state is AIModeState.LAUNCHED and self.controller.tick():
            return self._on_generation_finished()
        return None

    def finish_generation(self) -> GenerationStats:
        """Force the running iteration to end now (every marble is stopped)."""
        if self.controller.state is not ControllerState.EVALUATING:
            raise MarbleEvoError("No iteration is running")
        self.controller.stop_iteration()
        return self._on_generation_finished()

    def _on_generation_finished(self) -> GenerationStats:
        stats = self.controller.metrics.last
        self.scoreboard.update_iteration_count()
        self.scoreboard.update_ai_distance(stats.average_distance, stats.best_distance)
        self.ai_state = AIModeState.NEW_ITERATION_READY
        return stats

    def run_generations(self, generations: int, max_frames_per_generation: int = 2000) -> list[GenerationStats]:
        """Run *generations* full generations headless and return their stats."""
        if self.human_mode:
            raise MarbleEvoError("run_generations is only available in AI mode")
        if self.ai_state is AIModeState.INACTIVE:
            self.toggle_ai()

        finished: list[GenerationStats] = []
        while len(finished) < generations:
            frames = 0
            stats = None
            while stats is None:
                stats = self.update()
                frames += 1
                if stats is None and frames >= max_frames_per_generation:
                    logger.warning(
                        "[GameSession] Generation still moving after {} frames, stopping it",
                        frames,
                    )
                    stats = self.finish_generation()
            finished.append(stats)
        return finished

    # human mode

    def pointer_down(self) -> None:
        self._require_human()
        self.marble.reset()
        self.human_state = HumanModeState.INITIALIZATION_PHASE

    def pointer_up(self, pointer: Coordinate) -> tuple[float, float]:
        self._require_human()
        if self.human_state is not HumanModeState.INITIALIZATION_PHASE:
            raise MarbleEvoError("pointer_up without a preceding pointer_down")
        level = self.handler.get_level(self.level_number)
        power, angle = launch_from_drag(level.marble.position, pointer)
        self.marble.start(power, angle)
        self.human_state = HumanModeState.LAUNCHED
        logger.info("[GameSession] Marble launched (power={:.2f}, angle={:.3f})", power, angle)
        return power, angle

    def _update_human(self) -> None:
        if self.human_state is not HumanModeState.LAUNCHED:
            return
        distance = self.marble.distance_to(self.goal.position)
        if self.marble.is_moving():
            self.scoreboard.update_human_distance(distance)
            return
        self.scoreboard.update_human_distance(distance, final=True)
        self.scoreboard.update_iteration_count()
        self.human_state = HumanModeState.STOPPED

    def _require_human(self) -> None:
        if not self.human_mode or self.marble is None:
            raise MarbleEvoError("Pointer input is only available in human mode")
