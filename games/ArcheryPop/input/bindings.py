"""Routes InputEvents to session commands."""

from models import RunState
from games.ArcheryPop.input.input_event import InputAction, InputEvent
from games.ArcheryPop.session import ArcheryPopSession


def apply_input(session: ArcheryPopSession, event: InputEvent, player_name: str = "") -> bool:
    """
    Apply one input event to a session.

    AIM and EXIT are left to the caller. Resetting the best score is only
    honoured on the menu.

    Args:
        session: Target session
        event: Translated input event
        player_name: Name used by START

    Returns:
        True if the session accepted the command
    """
    if event.action == InputAction.FIRE and event.position is not None:
        return session.fire(event.position.x, event.position.y)
    if event.action == InputAction.TOGGLE_PAUSE:
        return session.toggle_pause()
    if event.action == InputAction.START:
        return session.start(player_name)
    if event.action == InputAction.QUIT:
        return session.quit()
    if event.action == InputAction.RESET_HIGHSCORE and session.get_run_state() == RunState.MENU:
        return session.reset_highscore()
    return False
