"""
plotext - render example financial charts.

Usage:
    python -m plotext.main align --bars 60
    python -m plotext.main candlesticks --symbol AAPL --period 3m

Environment variables (or a .env file):
    PLOTEXT_WIDTH, PLOTEXT_HEIGHT, PLOTEXT_DPI - image size (default: 900x600 @ 100)
    PLOTEXT_THEME - light or dark (default: light)
    PLOTEXT_STYLE - price panel style for `align` (default: candlesticks)
    PLOTEXT_OUTPUT_DIR - where images are written (default: .)
    PLOTEXT_LOG_LEVEL - logging level (default: INFO)
"""

import argparse
import asyncio
import logging
import sys
from pathlib import Path
from typing import Optional

import yaml
from dotenv import load_dotenv

import matplotlib
matplotlib.use('Agg')  # Headless backend

import matplotlib.pyplot as plt
from matplotlib.patches import Rectangle

from .charts import ChartGenerator, TOHLCV
from .config import Config
from .errors import PlotextError
from .exampledata import create_tohlcv_example_data
from .providers import ProviderError, YahooFinanceProvider, get_period_params
from .table import Table

logger = logging.getLogger("plotext")


COMMANDS = {
    # command: (style, show_volume)
    "candlesticks": ("candlesticks", False),
    "ohlc": ("ohlc", False),
    "ma": ("ma", False),
    "align": (None, True),
}

# Layout drawn by the `table` command
DEMO_TABLE = Table(
    col_widths=(2, 3, 1),
    row_heights=(3, 1, 2, 0.5),
    pad_top=1,
    pad_bottom=2,
    pad_right=3,
    pad_left=4,
    pad_x=5,
    pad_y=6,
)


def setup_logging(level: str, log_file: Optional[str] = None):
    """Configure logging for the application"""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=handlers,
    )

    # Reduce noise from libraries
    for name in ("matplotlib", "PIL", "urllib3", "yfinance"):
        logging.getLogger(name).setLevel(logging.WARNING)


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="plotext",
        description="Render candlestick, OHLC and volume charts with aligned panels.",
    )
    parser.add_argument("command", choices=[*COMMANDS, "table"],
                        help="Chart to render")
    parser.add_argument("--bars", type=int, default=60,
                        help="Number of example bars when no symbol is given")
    parser.add_argument("--symbol",
                        help="Fetch bars for this symbol from Yahoo Finance")
    parser.add_argument("--period", default="1m",
                        help="Period for --symbol (1d, 5d, 1m, 3m, 6m, 1y, ytd, 5y)")
    parser.add_argument("--output", "-o",
                        help="Output PNG path (default: <output_dir>/<command>.png)")
    parser.add_argument("--theme", choices=["light", "dark"],
                        help="Override the configured theme")
    parser.add_argument("--config",
                        help="YAML config file (default: environment variables)")
    return parser.parse_args(argv)


def load_bars(symbol: Optional[str], period: str, n: int) -> list[TOHLCV]:
    """Fetch bars from Yahoo, or make up n example bars."""
    if not symbol:
        logger.info(f"Using {n} example bars")
        return create_tohlcv_example_data(n)

    yf_period, interval = get_period_params(period)
    logger.info(f"Fetching {symbol} ({yf_period}/{interval}) from Yahoo Finance")
    return asyncio.run(YahooFinanceProvider().get_historical(symbol, yf_period, interval))


def render_table(path: Path, config: Config) -> Path:
    """Draw the cells of DEMO_TABLE, each framed and crossed."""
    width, height = config.width, config.height
    fig = plt.figure(figsize=(width / config.dpi, height / config.dpi), dpi=config.dpi)
    try:
        # One axes covering the figure, so data units are pixels
        ax = fig.add_axes((0, 0, 1, 1))
        ax.set_xlim(0, width)
        ax.set_ylim(0, height)
        ax.set_axis_off()

        canvas = fig.bbox
        for y in range(DEMO_TABLE.rows):
            for x in range(DEMO_TABLE.cols):
                cell = DEMO_TABLE.at(canvas, x, y)
                ax.add_patch(Rectangle((cell.xmin, cell.ymin), cell.width, cell.height,
                                       fill=False, edgecolor="black", linewidth=1))
                ax.plot([cell.xmin, cell.xmax], [cell.ymin, cell.ymax], color="black", linewidth=1)
                ax.plot([cell.xmin, cell.xmax], [cell.ymax, cell.ymin], color="black", linewidth=1)

        path.parent.mkdir(parents=True, exist_ok=True)
        # Leave out the matplotlib version stamp
        fig.savefig(path, format="png", dpi=config.dpi, metadata={"Software": None})
    finally:
        plt.close(fig)

    logger.info(f"Saved table layout to {path}")
    return path


def run(args: argparse.Namespace, config: Config) -> Path:
    """Render the chart for one command and return the output path."""
    output = Path(args.output) if args.output else Path(config.output_dir) / f"{args.command}.png"

    if args.command == "table":
        return render_table(output, config)

    style, show_volume = COMMANDS[args.command]
    generator = ChartGenerator(
        theme=config.theme,
        width=config.width,
        height=config.height,
        dpi=config.dpi,
        style=style or config.style,
        candle_width=config.candle_width,
        ma_window=config.ma_window,
    )
    bars = load_bars(args.symbol, args.period, args.bars)
    return generator.save(output, bars, symbol=args.symbol, show_volume=show_volume)


def load_config(args: argparse.Namespace) -> Config:
    """Config from --config, or from the environment, with CLI overrides applied."""
    config = Config.from_yaml(args.config) if args.config else Config.from_env()
    if args.theme:
        config.theme = args.theme
    return config


def main(argv=None) -> int:
    """Main entry point"""
    load_dotenv()
    args = parse_args(argv)

    try:
        config = load_config(args)
        errors = config.validate()
    except (OSError, ValueError, TypeError, yaml.YAMLError) as e:
        setup_logging("INFO")
        logger.error(f"Failed to load config: {e}")
        return 1

    setup_logging(config.log_level, config.log_file)

    if errors:
        for error in errors:
            logger.error(f"Config error: {error}")
        return 1

    try:
        run(args, config)
    except (PlotextError, ProviderError, ValueError) as e:
        logger.error(f"Failed to render {args.command}: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
