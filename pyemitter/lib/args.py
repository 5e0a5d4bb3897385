import argparse
import logging
import os


def arg_path_parse(path):
    if type(path) == list:
        return " ".join(path)
    else:
        return path


def parse_log_level(log_level, type):
    try:
        parsed_level = int(log_level)
    except (TypeError, ValueError):
        parsed_level = logging.getLevelName(str(log_level).upper())
    if not isinstance(parsed_level, int) or parsed_level < 0:
        print(
            f"[ERROR] {type}: {log_level} is not a valid log level. Setting to default: {default_log_level}"
        )
        parsed_level = default_log_level
    return parsed_level


# Default values for CLI args
default_event_name = "emitter.example"
default_arguments = ["trigger.argument.A", "trigger.argument.B", "trigger.argument.C"]
default_log_level = logging.INFO
default_max_log_files = 5


def parse_emitter_args(argv=None):
    # parse CLI args
    parser = argparse.ArgumentParser(
        description="Register a listener on an event, trigger it, then unsubscribe and trigger again."
    )

    parser.add_argument(
        "-e",
        "--event-name",
        help="Event name to subscribe to and trigger. (default: %s)" % default_event_name,
        default=default_event_name,
        required=False,
    )
    parser.add_argument(
        "arguments",
        nargs="*",
        help="Arguments passed to the listener when the event is triggered. (default: %s)"
        % " ".join(default_arguments),
        default=default_arguments,
    )
    parser.add_argument(
        "-l",
        "--log-level",
        help=f"Logging level int value or name (DEBUG: 10, INFO: 20, WARNING: 30, ERROR: 40, CRITICAL: 50). (default: {default_log_level} )",
        default=default_log_level,
        required=False,
    )
    parser.add_argument(
        "--log-dir",
        nargs="+",
        help="Directory to write log files to. Logs go to the console only if unspecified.",
        default=None,
        required=False,
    )
    parser.add_argument(
        "--max-log-files",
        help="Number of previous log files to keep in the log directory. (default: %s)"
        % default_max_log_files,
        default=default_max_log_files,
        type=int,
        required=False,
    )

    args = parser.parse_args(argv)

    # additional sanitization of args:
    args.log_level = parse_log_level(args.log_level, "Log level")

    log_dir = arg_path_parse(args.log_dir)
    if log_dir is not None:
        log_dir = os.path.expanduser(log_dir)
    args.log_dir = log_dir

    return args
