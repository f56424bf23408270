from datetime import datetime, timezone
import time

from dotenv import load_dotenv
import hydra
from loguru import logger
from omegaconf import DictConfig

from marblevo.config import ConfigurationHandler, register_resolvers
from marblevo.exceptions import MarbleEvoError
from marblevo.game import GameSession
from marblevo.utils.logger_setup import setup_logger


def run_experiment(cfg: DictConfig) -> None:
    start_time = time.time()

    logger.info("=" * 80)
    logger.info("Marble Evolution")
    logger.info("=" * 80)
    logger.info(f"Start time: {datetime.now(timezone.utc).isoformat()}")

    handler = ConfigurationHandler.from_dict(cfg.game)
    if handler.is_human_mode():
        raise MarbleEvoError("run.py drives the genetic algorithm; set game.game_settings.human_mode=false")

    level = handler.get_level(cfg.level_number)
    ga_config = handler.get_genetic_algorithm()
    logger.info(f"Level: {level.name}")
    logger.info(f"Individuals: {ga_config.individual_count}")
    logger.info(f"Max generations: {cfg.max_generations}")
    logger.info("")

    session = GameSession(handler, level_number=cfg.level_number)
    try:
        for stats in session.run_generations(
            cfg.max_generations, max_frames_per_generation=cfg.max_frames_per_generation
        ):
            logger.info(
                "Generation {:>4} | avg distance {:>10.4f} | best distance {:>10.4f}",
                stats.iteration,
                stats.average_distance,
                stats.best_distance,
            )
    except KeyboardInterrupt:
        logger.info("Run interrupted by user")
    finally:
        logger.info("")
        logger.info(
            f"Best distance overall: {session.scoreboard.ai_best_distance_overall:.4f}"
        )
        duration = time.time() - start_time
        logger.info(f"Total duration: {duration:.2f} seconds")
        logger.info("=" * 80)


@hydra.main(version_base=None, config_path="config", config_name="config")
def main(cfg: DictConfig) -> None:
    """Main entrypoint with Hydra configuration management."""
    load_dotenv()
    register_resolvers()

    log_file_path = setup_logger(
        log_dir=cfg.logging.log_dir,
        level=cfg.logging.level,
        rotation=cfg.logging.rotation,
        retention=cfg.logging.retention,
        verbose=cfg.game.game_settings.verbose_mode,
    )
    logger.info(f"Logging to {log_file_path}")

    run_experiment(cfg)


if __name__ == "__main__":
    main()
