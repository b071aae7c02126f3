"""CLI entry point for the weather widget."""

import argparse
import logging

from widget.config.defaults import DEFAULT_CONFIG_PATH
from widget.config.loader import (
    get_config_value,
    load_config,
    masked_config_json,
    set_config_value,
)
from widget.config.schema import WidgetConfig
from widget.controller import WeatherController
from widget.models.common import UnitSystem
from widget.models.view_state import RenderMode
from widget.reporting.renderer import render_json, render_text

TOGGLE_COMMAND = ":u"
QUIT_COMMAND = ":q"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        prog="widget",
        description="Current weather and 5-day forecast",
    )
    parser.add_argument(
        "--config", default=DEFAULT_CONFIG_PATH, help="Config YAML path"
    )
    parser.add_argument(
        "--units",
        choices=[u.value for u in UnitSystem],
        help="Override the configured unit system",
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Enable debug logging"
    )

    sub = parser.add_subparsers(dest="command")

    # search
    search_p = sub.add_parser("search", help="Look up one city")
    search_p.add_argument("city", help="City name")
    search_p.add_argument(
        "--json", action="store_true", help="Print the view as JSON"
    )

    # interactive
    sub.add_parser("interactive", help="Prompt for cities until :q")

    # serve
    serve_p = sub.add_parser("serve", help="Run the browser widget")
    serve_p.add_argument("--host", help="Bind address")
    serve_p.add_argument("--port", type=int, help="Bind port")

    # config show / config set
    config_p = sub.add_parser("config", help="Config operations")
    config_sub = config_p.add_subparsers(dest="config_command")
    config_sub.add_parser("show", help="Display current config")
    set_p = config_sub.add_parser("set", help="Set a config value")
    set_p.add_argument("keyvalue", help="key=value to set")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 1

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_config(args.config)
    if args.units:
        config = set_config_value(config, "display.unit", args.units)

    if args.command == "search":
        return _cmd_search(config, args)
    elif args.command == "interactive":
        return _cmd_interactive(config)
    elif args.command == "serve":
        return _cmd_serve(config, args)
    elif args.command == "config":
        return _cmd_config(config, args)
    else:
        parser.print_help()
        return 1


def _cmd_search(config: WidgetConfig, args) -> int:
    alerts: list[str] = []

    def alert(message: str) -> None:
        alerts.append(message)
        print(message)

    controller = WeatherController.from_config(config, alert=alert)
    controller.search(args.city)
    if alerts:
        return 1
    state = controller.snapshot()
    if args.json:
        print(render_json(state))
    else:
        print(render_text(state))
    return 1 if state.render_mode == RenderMode.ERROR else 0


def _cmd_interactive(config: WidgetConfig) -> int:
    controller = WeatherController.from_config(config, alert=print)
    controller.start()
    print(render_text(controller.snapshot()))
    while True:
        prompt = (
            f"Search city ({TOGGLE_COMMAND} {controller.state.unit.toggle_label}, "
            f"{QUIT_COMMAND} quit): "
        )
        try:
            line = input(prompt)
        except EOFError:
            break
        command = line.strip()
        if command == QUIT_COMMAND:
            break
        if command == TOGGLE_COMMAND:
            controller.toggle_unit()
        else:
            controller.search(command)
            if not command:
                continue
        print(render_text(controller.snapshot()))
    return 0


def _cmd_serve(config: WidgetConfig, args) -> int:
    import uvicorn

    from widget import dashboard

    controller = WeatherController.from_config(config)
    controller.start()
    dashboard.set_controller(controller)
    uvicorn.run(
        dashboard.app,
        host=args.host or config.server.host,
        port=args.port or config.server.port,
    )
    return 0


def _cmd_config(config: WidgetConfig, args) -> int:
    if args.config_command == "show":
        print(masked_config_json(config))
        return 0
    elif args.config_command == "set":
        kv = args.keyvalue
        if "=" not in kv:
            print("Error: use key=value format")
            return 1
        key, value = kv.split("=", 1)
        try:
            new_config = set_config_value(config, key.strip(), value.strip())
            print(f"Set {key} = {get_config_value(new_config, key.strip())}")
            return 0
        except Exception as e:
            print(f"Error: {e}")
            return 1
    else:
        print("Use: config show | config set key=value")
        return 1
