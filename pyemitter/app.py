"""Example of using the default event registry from the command line."""

import logging

from pyemitter.lib import emitter
from pyemitter.lib.args import parse_emitter_args
from pyemitter.lib.logger import configure_logger


def run_example(event_name, arguments):
    """Subscribe, trigger, unsubscribe and trigger again on the default registry.

    Returns:
        list: Argument tuples the listener received. Only the first trigger
        reaches it since all subscriptions are removed before the second.
    """
    received = []

    def listener(*args):
        received.append(args)
        logging.info("The event was triggered with the following arguments: %s", list(args))

    emitter.on(event_name, listener)
    emitter.trigger(event_name, *arguments)

    # Remove all subscriptions for the event name
    emitter.off(event_name)

    # The subscribed function is not triggered due to being removed
    if not emitter.trigger(event_name, "trigger.argument.D"):
        logging.info("No listeners left on << %s >>", event_name)

    return received


def main(argv=None):
    args = parse_emitter_args(argv)
    configure_logger(
        log_level=args.log_level, log_dir=args.log_dir, max_log_files=args.max_log_files
    )
    run_example(args.event_name, args.arguments)


if __name__ == "__main__":
    main()
