import argparse
import os
import sys
import time

from .utils.common import load_env, load_env_file
from .utils.config_builder import build_config, build_template
from .utils.constants import (
    DEFAULT_ENV_FILE,
    DEFAULT_LOCAL_RPC_URL,
    RUN_CONFIG_FILENAME,
    START_TIME,
)
from .utils.custom_exceptions import BaseCustomException, HardhatError, RenderError
from .utils.env_report import check_env
from .utils.hardhat import hardhat
from .utils.helpers import remove_file
from .utils.logger import logger
from .utils.node_handler import probe_networks
from .utils.renderer import FORMATS, detect_format, render, write_config

__version__ = "0.1.0"


def build_command(args) -> int:
    if args.format:
        fmt = args.format
    elif args.output:
        try:
            fmt = detect_format(args.output)
        except ValueError as e:
            raise RenderError(str(e))
    else:
        fmt = "js"

    # only JavaScript can defer to process.env, everything else is resolved now
    if fmt == "js" and not args.inline:
        config = build_template()
    else:
        config = build_config()

    if args.output:
        write_config(config, args.output, fmt)
    else:
        sys.stdout.write(render(config, fmt))
    return 0


def check_command(args) -> int:
    logger.info("Checking env...")
    missing = check_env(strict=args.strict)

    if not args.probe:
        return 0

    logger.divider()
    logger.info("Probing RPC endpoints...")
    results = probe_networks(build_config())
    mismatched = [result.network for result in results if not result.matched]
    if mismatched:
        logger.warn("Networks failed the probe", ", ".join(mismatched))
    elif results:
        logger.okay("All probed networks match their chain IDs")

    return 1 if args.strict and (missing or mismatched) else 0


def _with_rendered_config(args, action) -> int:
    config_path = args.config_path or RUN_CONFIG_FILENAME
    # the file is removed afterwards, so never take over an existing one
    if os.path.exists(config_path):
        raise HardhatError(
            f"Refusing to overwrite existing file '{config_path}', pass another --config-path"
        )
    # secrets stay in the environment, the file only references process.env
    write_config(build_template(), config_path, "js", with_dotenv=False)
    try:
        return action(config_path)
    except KeyboardInterrupt:
        logger.info("Keyboard interrupt by user")
        return 130
    finally:
        if not args.keep:
            remove_file(config_path)
            logger.info("Removed generated config", config_path)


def run_command(args) -> int:
    return _with_rendered_config(
        args, lambda config_path: hardhat.run(config_path, args.task)
    )


def node_command(args) -> int:
    local_rpc_url = (
        args.local_rpc_url
        or load_env("LOCAL_RPC_URL", masked=False)
        or DEFAULT_LOCAL_RPC_URL
    )
    return _with_rendered_config(
        args, lambda config_path: hardhat.node(config_path, local_rpc_url)
    )


def _add_generated_config_arguments(parser):
    parser.add_argument(
        "--config-path",
        default=None,
        help=f"Where to write the generated config (default: {RUN_CONFIG_FILENAME})",
    )
    parser.add_argument(
        "--keep",
        help="Keep the generated config after Hardhat exits",
        action="store_true",
    )


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(
        prog="hhconfig",
        description="Build the Hardhat toolchain config from the environment",
    )
    parser.add_argument(
        "--version", "-V", action="store_true", help="Display version information"
    )
    parser.add_argument(
        "--env-file",
        default=DEFAULT_ENV_FILE,
        help="Dotenv file to seed the environment from, set variables win",
    )
    subparsers = parser.add_subparsers(dest="command")

    build_parser = subparsers.add_parser("build", help="Render the config")
    build_parser.add_argument(
        "output", nargs="?", default=None, help="Output file, stdout if omitted"
    )
    build_parser.add_argument(
        "--format",
        "-f",
        choices=FORMATS,
        default=None,
        help="Output format, detected from the output extension by default",
    )
    build_parser.add_argument(
        "--inline",
        help="Write env values into JavaScript output instead of process.env references",
        action="store_true",
    )
    build_parser.set_defaults(handler=build_command)

    check_parser = subparsers.add_parser("check", help="Report on the env vars the config reads")
    check_parser.add_argument(
        "--strict",
        help="Fail if any env var is missing or any probed network mismatches",
        action="store_true",
    )
    check_parser.add_argument(
        "--probe",
        help="Ask every configured RPC URL for its chain ID",
        action="store_true",
    )
    check_parser.set_defaults(handler=check_command)

    run_parser = subparsers.add_parser("run", help="Run a Hardhat task with the config")
    _add_generated_config_arguments(run_parser)
    run_parser.add_argument(
        "task", nargs=argparse.REMAINDER, help="Hardhat task and its arguments"
    )
    run_parser.set_defaults(handler=run_command)

    node_parser = subparsers.add_parser("node", help="Start a forking Hardhat node")
    _add_generated_config_arguments(node_parser)
    node_parser.add_argument(
        "--local-rpc-url",
        default=None,
        help=f"URL to bind the node to (default: $LOCAL_RPC_URL or {DEFAULT_LOCAL_RPC_URL})",
    )
    node_parser.set_defaults(handler=node_command)

    return parser, parser.parse_args(argv)


def main(argv=None) -> int:
    parser, args = parse_arguments(argv)
    if args.version:
        print(f"hhconfig {__version__}")
        return 0
    if args.command is None:
        parser.print_help()
        return 1

    # stdout carries the rendered config
    logger.quiet = args.command == "build" and args.output is None

    try:
        load_env_file(args.env_file)
        return_code = args.handler(args)
    except BaseCustomException as custom_exc:
        logger.error(str(custom_exc))
        return 1

    execution_time = time.time() - START_TIME
    logger.okay(f"Done in {round(execution_time, 3)}s ✨")
    return return_code


if __name__ == "__main__":
    sys.exit(main())
