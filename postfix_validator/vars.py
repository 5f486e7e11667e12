from types import MappingProxyType

from postfix_validator.extra.types import Operator

OPERATORS: MappingProxyType[str, Operator] = MappingProxyType({
        "||": Operator(1, "OR (command separator)"),
        "&&": Operator(2, "AND (conditional execution)"),
        "|": Operator(3, "Pipe (stdout to stdin)"),
        ";": Operator(4, "Command terminator"),
        "(": Operator(0, "Start subshell group"),
        ")": Operator(0, "End subshell group"),
        ">": Operator(5, "Output redirection"),
        ">>": Operator(5, "Append output"),
        "<": Operator(5, "Input redirection"),
        "2>": Operator(5, "Error redirection"),
    })


SHORTCUTS: dict[str, str] = {  # shortcut: action
        ":help": "Show operators, example and shortcuts",
        ":clear": "Clear all inputs",
        ":history": "Show validation history",
        ":clear-history": "Clear history",
        ":example": "Load and validate example command",
        "q": "Exit",
    }
