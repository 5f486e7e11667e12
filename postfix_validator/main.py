import logging
import os
from sys import stdout

import postfix_validator.constants as cst
from postfix_validator.extra.exceptions import UnknownShortcutError
from postfix_validator.extra.types import Context, ValidationResult
from postfix_validator.extra.utils import description_of
from postfix_validator.history import ValidationHistory
from postfix_validator.session import Session
from postfix_validator.vars import SHORTCUTS

logger = logging.getLogger(__name__)


def render_result(result: ValidationResult) -> list[str]:
    if result.is_valid:
        return ["✓ Valid postfix notation"]
    if result.error_message:
        return [f"⚠ {result.error_message}"]
    return [
        "✗ Invalid postfix notation",
        f"  Command: {result.input_command}",
        f"  Expected: {result.expected}",
        f"  Provided: {result.provided}",
    ]


def render_history(history: ValidationHistory) -> list[str]:
    if not len(history):
        return ["History is empty"]
    lines = []
    for item in history:
        lines.append(f"[{item.timestamp}] {'VALID' if item.is_valid else 'INVALID'}  Cmd: {item.input_command}")
        if not item.is_valid:
            lines.append(f"  Exp: {item.expected}")
    return lines


def render_help(ctx: Context) -> list[str]:
    lines = ["Command Line Operators:"]
    lines += [f"  {op:<4}{description_of(op, ctx.operators)}" for op in ctx.operators]
    lines += [
        "Examples:",
        "  Infix: cmd1 && cmd2 || cmd3",
        "  Postfix: cmd1 cmd2 && cmd3 ||",
        "Shortcuts:",
    ]
    lines += [f"  {key}: {action}" for key, action in SHORTCUTS.items()]
    lines.append("Tip: Use spaces between operators. Quotes preserve spaces.")
    return lines


def handle_shortcut(session: Session, shortcut: str) -> list[str]:
    """
    Runs shortcut command
    :param session: current session
    :param shortcut: line starting with ':'
    :return: lines to show
    :raises UnknownShortcutError: if shortcut is not known
    """
    shortcut = shortcut.strip()
    if shortcut == ":help":
        return render_help(session.ctx)
    elif shortcut == ":clear":
        session.clear_all()
        return ["Inputs cleared"]
    elif shortcut == ":history":
        return render_history(session.history)
    elif shortcut == ":clear-history":
        session.clear_history()
        return ["History cleared"]
    elif shortcut == ":example":
        session.load_example()
        lines = [f"Command: {session.command}", f"Postfix: {session.postfix}"]
        return lines + render_result(session.validate())
    raise UnknownShortcutError(f"Unknown shortcut '{shortcut}', type :help for the list", shortcut=shortcut)


def main():
    """
    Entry point for application. Reads command and postfix candidate from stdin and validates them
    """
    session = Session()
    while True:

        try:
            command: str = input(cst.COMMAND_PROMPT)
        except EOFError:
            return
        if command.strip() == cst.EXIT_COMMAND:
            return
        if command.strip().startswith(cst.SHORTCUT_PREFIX):
            try:
                lines = handle_shortcut(session, command)
            except UnknownShortcutError as e:
                logger.error(e)
                continue
        else:
            session.command = command
            try:
                session.postfix = input(cst.POSTFIX_PROMPT)
            except EOFError:
                return
            lines = render_result(session.validate())
        for line in lines:
            logger.info(line)


def setup_logging():
    os.makedirs(os.path.dirname(cst.LOG_FILE), exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        handlers=[
            logging.FileHandler(cst.LOG_FILE, mode="a", encoding="utf-8"),
            logging.StreamHandler(stdout),
        ],
        format=cst.FORMAT
    )


def run():
    setup_logging()
    main()


if __name__ == "__main__":
    run()
