"""
Command-line entry point.

Usage:
    printweight <stl-file> <x-dim> <y-dim> <z-dim> <infill_percentage> [material]
    printweight --api

Prints {"weight_grams":"<value>"} on stdout. With --api, serves the HTTP
endpoint on API_HOST:API_PORT instead.
"""

import argparse
import json
import logging
import sys

from .config import settings
from .errors import WeightEstimationError
from .estimator import estimate_weight
from .mesh_loader import load_mesh
from .models import Material
from .weights import validate_infill

logger = logging.getLogger(__name__)

MATERIALS_HELP = "Materials: " + ", ".join(
    f"{m.value} (default)" if m is Material.PLA else m.value for m in Material
)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="printweight",
        description="Estimate the printed weight of an STL model.",
        epilog=MATERIALS_HELP,
    )
    parser.add_argument("--api", action="store_true",
                        help=f"start the API server on {settings.API_HOST}:{settings.API_PORT}")
    parser.add_argument("stl_file", nargs="?", help="path to the STL file")
    parser.add_argument("x_dim", nargs="?", type=float, help="target X size (mm)")
    parser.add_argument("y_dim", nargs="?", type=float, help="target Y size (mm)")
    parser.add_argument("z_dim", nargs="?", type=float, help="target Z size (mm)")
    parser.add_argument("infill_percentage", nargs="?", type=float, help="infill, 0-100")
    parser.add_argument("material", nargs="?", default=None, help="pla, abs, petg or tpu")
    return parser


def run_server():
    import uvicorn

    uvicorn.run(
        "printweight.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        log_level=settings.LOG_LEVEL.lower(),
    )


def main(argv=None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=settings.LOG_LEVEL)

    if args.api:
        logger.info("Starting API server on http://%s:%d", settings.API_HOST, settings.API_PORT)
        run_server()
        return 0

    if args.infill_percentage is None:
        parser.print_usage(sys.stderr)
        print(MATERIALS_HELP, file=sys.stderr)
        return 2

    try:
        validate_infill(args.infill_percentage)
        mesh = load_mesh(args.stl_file)
        estimate = estimate_weight(
            mesh, args.x_dim, args.y_dim, args.z_dim, args.infill_percentage,
            args.material,
        )
    except FileNotFoundError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except WeightEstimationError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(json.dumps(estimate.to_payload(), separators=(",", ":")))
    return 0


if __name__ == "__main__":
    sys.exit(main())
