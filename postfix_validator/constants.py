FORMAT = "[%(levelname)s - %(funcName)4s() ] %(message)s"
LOG_FILE = "logs/logs.log"

HISTORY_SIZE = 5
TIME_FORMAT = "%H:%M:%S"

UNKNOWN_PRECEDENCE = -1

GROUP_OPEN = "("
GROUP_CLOSE = ")"
QUOTES = ('"', "'")

EMPTY_INPUT_MESSAGE = "Both command and postfix inputs must contain valid expressions"

EXAMPLE_COMMAND = 'struggle -status && grep "fate" destiny.log || echo "Free from destiny... for now."'
EXAMPLE_POSTFIX = 'struggle -status grep "fate" destiny.log && echo "Free from destiny... for now." ||'

EXIT_COMMAND = "q"
SHORTCUT_PREFIX = ":"
COMMAND_PROMPT = "$ Command(:help for help, q to exit): "
POSTFIX_PROMPT = "$ Postfix to validate: "
