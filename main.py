# main.py
"""
Main entry point for the particle field background.

This script orchestrates the whole lifecycle:
1. Loads configuration from `config.json`.
2. Initializes the logging system.
3. Opens the display and populates the field to fit it.
4. Ticks the animation on a fixed interval until the window is closed.
5. Handles clean shutdown.
"""
import logging
import cProfile
import pstats
import io

from utils import setup_logging, load_config, make_rng
from constants import FULLSCREEN, TICK_INTERVAL_MS


def main(config_path: str = 'config.json'):
    """
    The main function to run the animation.
    """
    # Logging is not set up yet, so we use a print for this one error.
    try:
        config = load_config(config_path)
    except Exception as e:
        print(f"FATAL: Could not load {config_path}. Error: {e}")
        return

    setup_logging(config)

    logging.info("--- Particle Field Starting ---")

    run_params = config.get('run_control', {})

    from particle import Field
    from simulation import Animator
    from visualization import Visualizer, PygameScheduler

    # --- Component Initialization ---
    # 1. The visualizer decides the surface size.
    visualizer = Visualizer(fullscreen=run_params.get('fullscreen', FULLSCREEN))

    # 2. The field is laid out to fit it.
    rng = make_rng(run_params.get('seed'))
    field = Field.populate(*visualizer.canvas.size, rng)
    animator = Animator(
        field,
        visualizer.canvas,
        log_throttle=run_params.get('log_throttle_frames', 400),
    )

    scheduler = PygameScheduler(visualizer)
    max_frames = run_params.get('max_frames')

    def present():
        visualizer.present()
        if max_frames is not None and animator.frame >= max_frames:
            logging.info(f"Reached max_frames ({max_frames}). Stopping animation.")
            handle.cancel()

    handle = animator.start(scheduler, TICK_INTERVAL_MS, after_tick=present)

    profiler = cProfile.Profile() if run_params.get('profile', False) else None

    if profiler:
        profiler.enable()
    scheduler.run()
    if profiler:
        profiler.disable()

    visualizer.close()
    logging.info(f"Animation loop finished after {animator.frame} frames.")

    if profiler:
        logging.info("--- Performance Profile ---")
        s = io.StringIO()
        # Sort by cumulative time spent in the function
        stats = pstats.Stats(profiler, stream=s).sort_stats('cumtime')
        stats.print_stats(20)
        logging.info(f"\n{s.getvalue()}")

    logging.info("--- Particle Field Shutting Down ---")


if __name__ == "__main__":
    main()
