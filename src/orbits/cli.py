"""
Orbits CLI - Command line interface for the Hohmann transfer calculator.
"""

import argparse
import json
import logging
import sys

from astropy import units as u

from orbits.exceptions import OrbitsError

logger = logging.getLogger(__name__)


def _add_simple_arguments(parser):
    parser.add_argument("--primary-mass", type=float, required=True, help="Primary body mass (kg)")
    parser.add_argument("--start-radius", type=float, required=True, help="Starting orbit radius (m)")
    parser.add_argument("--dest-radius", type=float, required=True, help="Destination orbit radius (m)")
    parser.add_argument("--json", action="store_true", help="Print the result as JSON")


def _days(seconds: float) -> float:
    return (seconds * u.s).to(u.day).value


def _format_report(response, starting_orbit, destination_orbit) -> str:
    days = _days(response.transfer_time)
    return "\n".join([
        f"Starting period:    {_days(starting_orbit.period()):.2f} days",
        f"Destination period: {_days(destination_orbit.period()):.2f} days",
        f"Transfer time:      {response.transfer_time:.1f} s ({days:.1f} days)",
        f"Insertion delta-v:  {response.insertion_delta_v:.1f} m/s",
        f"Arrival delta-v:    {response.arrival_delta_v:.1f} m/s",
        f"Total delta-v:      {response.total_delta_v:.1f} m/s",
    ])


def _run_transfer(request, as_json: bool) -> int:
    from orbits.api.schemas import TransferResponse
    from orbits.astro.hohmann import compute_transfer

    try:
        starting_orbit, destination_orbit = request.build_orbits()
        response = TransferResponse.from_result(compute_transfer(starting_orbit, destination_orbit))
    except OrbitsError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(response.model_dump(by_alias=True), indent=2))
    else:
        print(_format_report(response, starting_orbit, destination_orbit))
    return 0


def main(argv=None):
    """Main entry point for the Orbits CLI."""
    parser = argparse.ArgumentParser(
        description="Orbits - Hohmann transfer calculator (SI units)",
        prog="orbits",
    )
    parser.add_argument("--log-level", type=str, default="WARNING", help="Logging level")

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Simple command
    simple_parser = subparsers.add_parser("simple", help="Transfer between orbits around one body")
    _add_simple_arguments(simple_parser)

    # Interplanetary command
    inter_parser = subparsers.add_parser(
        "interplanetary", help="Transfer between orbits around two planets"
    )
    _add_simple_arguments(inter_parser)
    inter_parser.add_argument("--start-planet-mass", type=float, required=True, help="Starting planet mass (kg)")
    inter_parser.add_argument(
        "--start-planet-radius", type=float, required=True, help="Starting planet's orbit radius (m)"
    )
    inter_parser.add_argument("--dest-planet-mass", type=float, required=True, help="Destination planet mass (kg)")
    inter_parser.add_argument(
        "--dest-planet-radius", type=float, required=True, help="Destination planet's orbit radius (m)"
    )

    # Serve command
    serve_parser = subparsers.add_parser("serve", help="Start API server")
    serve_parser.add_argument("--config", type=str, help="Path to YAML config file")
    serve_parser.add_argument("--host", type=str, help="Host to bind")
    serve_parser.add_argument("--port", type=int, help="Port to bind")

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    from orbits.config import configure_logging

    if args.command == "simple":
        from orbits.api.schemas import SimpleTransferRequest

        configure_logging(args.log_level)
        request = SimpleTransferRequest(
            primary_body_mass=args.primary_mass,
            starting_orbit_radius=args.start_radius,
            destination_orbit_radius=args.dest_radius,
        )
        return _run_transfer(request, args.json)

    elif args.command == "interplanetary":
        from orbits.api.schemas import InterplanetaryTransferRequest

        configure_logging(args.log_level)
        request = InterplanetaryTransferRequest(
            primary_body_mass=args.primary_mass,
            starting_orbit_radius=args.start_radius,
            destination_orbit_radius=args.dest_radius,
            starting_planet_mass=args.start_planet_mass,
            starting_planet_orbit_radius=args.start_planet_radius,
            destination_planet_mass=args.dest_planet_mass,
            destination_planet_orbit_radius=args.dest_planet_radius,
        )
        return _run_transfer(request, args.json)

    elif args.command == "serve":
        import uvicorn

        from orbits.api.app import create_app
        from orbits.config import ServiceConfig

        config = ServiceConfig.load(args.config)
        if args.host:
            config = config.model_copy(update={"host": args.host})
        if args.port:
            config = config.model_copy(update={"port": args.port})
        configure_logging(config.log_level)

        logger.info("Starting server on %s:%d", config.host, config.port)
        uvicorn.run(create_app(config), host=config.host, port=config.port, log_level=config.log_level.lower())
        return 0

    return 0


if __name__ == "__main__":
    sys.exit(main())
