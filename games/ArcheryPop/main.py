#!/usr/bin/env python3
"""
Archery Pop - Standalone entry point.

Run this to play Archery Pop with the mouse.

Usage:
    python main.py
    python main.py --name Robin
    python main.py --physics-rate 120 --log-level debug
"""

import argparse
import os
import sys
from pathlib import Path

import pygame

# Support running from any directory - add project root to path
_project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..', '..'))
if _project_root not in sys.path:
    sys.path.insert(0, _project_root)

from aps.highscore import JsonHighScoreStore
from aps.logging import (
    close_all_sinks,
    configure_logging,
    create_sink_for_module,
    get_logger,
    register_sink,
)
from models import RunState
from games.ArcheryPop.config import (
    BOARD_WIDTH,
    BOARD_HEIGHT,
    FPS,
    PHYSICS_RATE,
    HIGHSCORE_FILE,
    build_session_config,
)
from games.ArcheryPop.input import InputAction, PygameInputSource, apply_input
from games.ArcheryPop.renderer import SessionRenderer
from games.ArcheryPop.session import ArcheryPopSession

log = get_logger('main')


def main():
    """Run Archery Pop."""
    parser = argparse.ArgumentParser(description="Archery Pop")
    parser.add_argument('--name', type=str, default=os.getenv('USER', 'Archer'), help='Player name')
    parser.add_argument('--fps', type=int, default=FPS, help='Frame rate cap')
    parser.add_argument('--physics-rate', type=float, default=PHYSICS_RATE,
                        help='Physics ticks per second (0 = one tick per frame)')
    parser.add_argument('--highscore-file', type=str, default=HIGHSCORE_FILE or None,
                        help='High score JSON file')
    parser.add_argument('--log-level', type=str, default=None,
                        choices=['trace', 'debug', 'info', 'warning', 'error', 'critical'],
                        help='Global log level')
    args = parser.parse_args()

    if args.log_level:
        configure_logging(level=args.log_level)

    register_sink('session', create_sink_for_module('session'))

    config = build_session_config(physics_rate=args.physics_rate or None)
    store_path = Path(args.highscore_file) if args.highscore_file else None
    session = ArcheryPopSession(config, JsonHighScoreStore(store_path, key=config.highscore_key))

    pygame.init()
    screen = pygame.display.set_mode((BOARD_WIDTH, BOARD_HEIGHT))
    pygame.display.set_caption("Archery Pop")

    input_source = PygameInputSource(BOARD_WIDTH, BOARD_HEIGHT)
    renderer = SessionRenderer(BOARD_WIDTH, BOARD_HEIGHT)

    print("=" * 50)
    print("ARCHERY POP")
    print("=" * 50)
    print("\nShoot the falling targets before they hit the floor!")
    print("\nControls:")
    print("  - Click to shoot")
    print("  - ENTER to start")
    print("  - SPACE to pause / resume")
    print("  - Q to quit to the menu (paused or game over)")
    print("  - R to reset the high score (menu)")
    print("  - ESC to exit")
    print("=" * 50)

    clock = pygame.time.Clock()
    running = True
    last_state = session.get_run_state()

    while running:
        dt = clock.tick(args.fps) / 1000.0

        input_source.update(dt)
        for event in input_source.poll_events():
            if event.action == InputAction.EXIT:
                running = False
                break
            apply_input(session, event, args.name)

        session.tick(dt)

        renderer.render(screen, session.snapshot(), input_source.aim, args.name)
        pygame.display.flip()

        state = session.get_run_state()
        if state != last_state and state == RunState.GAME_OVER:
            summary = session.get_final_summary()
            print(f"\nGAME OVER! {summary.player_name} scored {summary.score}")
            if summary.is_new_highscore:
                print("New high score!")
        last_state = state

    log.info("Exiting")
    close_all_sinks()
    pygame.quit()
    return 0


if __name__ == "__main__":
    sys.exit(main())
