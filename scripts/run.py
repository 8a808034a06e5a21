# scripts/run.py
import argparse
import dataclasses
import logging
import sys

from api.estimate_depth_map import estimate_depth_map
from stereo.config import DepthConfig, load_depth_config
from stereo.errors import DepthError

# values the viewer application passes to the core
DEFAULT_BLOCK_SIZE = 11
DEFAULT_MAX_DISPARITY = 64
DEFAULT_CENTER_BIAS = 0.4
DEFAULT_EDGE_WEIGHT = 0.6

def build_parser():
    parser = argparse.ArgumentParser(description="Compute a depth map from a stereo pair or a single image")
    parser.add_argument('--left', type=str, required=True, help='Path to left image (or the only image)')
    parser.add_argument('--right', type=str, default=None, help='Path to right image; omit for single-image fallback')
    parser.add_argument('--out', type=str, default='depth.png', help='Output depth map path')
    parser.add_argument('--config', type=str, default=None, help='JSON file with all depth options')
    parser.add_argument('--block_size', type=int, default=None, help='Matching window side length (odd)')
    parser.add_argument('--max_disparity', type=int, default=None, help='Upper bound of disparity search')
    parser.add_argument('--no_smoothing', action='store_true', help='Skip median + gaussian post filtering')
    parser.add_argument('--no_normalize', action='store_true', help='Keep raw disparities instead of rescaling to 0-255')
    parser.add_argument('--center_bias', type=float, default=None, help='Weight of the radial prior (fallback only)')
    parser.add_argument('--edge_weight', type=float, default=None, help='Weight of the edge term (fallback only)')
    parser.add_argument('--show', action='store_true', help='Display the result')
    parser.add_argument('-v', '--verbose', action='store_true', help='Debug logging')
    return parser

def resolve_config(args) -> DepthConfig:
    if args.config is not None:
        config = load_depth_config(args.config)
    else:
        config = DepthConfig(
            block_size=DEFAULT_BLOCK_SIZE,
            max_disparity=DEFAULT_MAX_DISPARITY,
            smoothing=True,
            normalize=True,
            center_bias=DEFAULT_CENTER_BIAS,
            edge_weight=DEFAULT_EDGE_WEIGHT,
        )

    overrides = {}
    if args.block_size is not None:
        overrides["block_size"] = args.block_size
    if args.max_disparity is not None:
        overrides["max_disparity"] = args.max_disparity
    if args.no_smoothing:
        overrides["smoothing"] = False
    if args.no_normalize:
        overrides["normalize"] = False
    if args.center_bias is not None:
        overrides["center_bias"] = args.center_bias
    if args.edge_weight is not None:
        overrides["edge_weight"] = args.edge_weight
    return dataclasses.replace(config, **overrides).validate()

def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = resolve_config(args)
        result = estimate_depth_map(
            left_path=args.left,
            right_path=args.right,
            config=config,
            output_path=args.out,
            show_vis=args.show,
        )
    except DepthError as e:
        logging.getLogger("scripts.run").error("%s", e)
        return 2

    print(f"{result.mode} depth map {result.depth.shape[1]}x{result.depth.shape[0]} -> {args.out}")
    return 0

if __name__ == "__main__":
    sys.exit(main())
