#!/usr/bin/env python3
"""Generate a demo GIF of an engine-vs-engine Nim game."""

from __future__ import annotations

import argparse
import random
import sys
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from nimengine.constants import INITIAL_PILE, Algorithm
from nimengine.selector import MoveSelection, choose_move

OUT_DIR = ROOT / "docs" / "visuals"

W, H = 1100, 640
STONE_X, STONE_Y, STONE_R = 60, 200, 28

COLORS = {
    "bg": "#161616",
    "panel": "#1e1e1e",
    "border": "#2b2b2b",
    "stone": "#9f988d",
    "taken": "#3a3a3a",
    "text": "#e6e2d8",
    "gold": "#c6a25a",
    "max": "#4e7d49",
    "min": "#7d2a2a",
    "muted": "#9f988d",
}


def _font(size: int) -> ImageFont.FreeTypeFont | ImageFont.ImageFont:
    for family in ("/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf", "/Library/Fonts/Arial.ttf"):
        try:
            return ImageFont.truetype(family, size=size)
        except OSError:
            continue
    return ImageFont.load_default()


FONT_TITLE = _font(36)
FONT_BODY = _font(20)
FONT_MONO = _font(18)


def _base_canvas(title: str) -> tuple[Image.Image, ImageDraw.ImageDraw]:
    img = Image.new("RGB", (W, H), COLORS["bg"])
    draw = ImageDraw.Draw(img)
    draw.text((40, 20), title, fill=COLORS["text"], font=FONT_TITLE)
    draw.rounded_rectangle((690, 70, 1050, 560), radius=14, fill=COLORS["panel"], outline=COLORS["border"], width=2)
    return img, draw


def _draw_pile(draw: ImageDraw.ImageDraw, stones: int, taken: int, total: int) -> None:
    for idx in range(total):
        cx = STONE_X + idx * (STONE_R * 2 + 14)
        if idx < stones:
            fill = COLORS["stone"]
        elif idx < stones + taken:
            fill = COLORS["gold"]
        else:
            fill = COLORS["taken"]
        draw.ellipse((cx - STONE_R, STONE_Y - STONE_R, cx + STONE_R, STONE_Y + STONE_R), fill=fill, outline=COLORS["border"])
    draw.text((40, 280), f"Stones left: {stones}", fill=COLORS["text"], font=FONT_BODY)


def _draw_selection(draw: ImageDraw.ImageDraw, side: str, selection: MoveSelection) -> None:
    draw.text((720, 100), side.upper(), fill=COLORS["gold"], font=FONT_BODY)
    draw.text((720, 135), f"{selection.algorithm.value}  depth {selection.search_depth}", fill=COLORS["text"], font=FONT_MONO)
    draw.text((720, 170), f"Takes {selection.move}", fill=COLORS["text"], font=FONT_BODY)

    draw.text((720, 220), "ROOT CHILDREN", fill=COLORS["gold"], font=FONT_BODY)
    for take, child in enumerate(selection.tree.children, start=1):
        y = 250 + (take - 1) * 34
        label = "pruned" if child.pruned else f"score {child.score:+d}"
        color = COLORS["muted"] if child.pruned else (COLORS["max"] if child.score > 0 else COLORS["min"])
        draw.rounded_rectangle((720, y, 1020, y + 28), radius=8, fill=color)
        draw.text((730, y + 4), f"-{take}  ->  {child.stones} left  {label}", fill=COLORS["text"], font=FONT_MONO)

    stats = selection.stats
    draw.text((720, 380), "NODES VISITED", fill=COLORS["gold"], font=FONT_BODY)
    draw.text((720, 415), f"Minimax    {stats.minimax_nodes}", fill=COLORS["text"], font=FONT_MONO)
    draw.text((720, 445), f"Alpha-Beta {stats.alphabeta_nodes}", fill=COLORS["text"], font=FONT_MONO)


def _save_gif(path: Path, frames: list[Image.Image], duration_ms: int = 350) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    frames[0].save(
        path,
        save_all=True,
        append_images=frames[1:],
        duration=duration_ms,
        loop=0,
        optimize=True,
    )


def make_self_play(pile: int, algorithm: Algorithm, seed: int, duration_ms: int) -> Path:
    rng = random.Random(seed)
    frames: list[Image.Image] = []
    stones = pile
    turn = 0

    while stones > 0:
        side = "engine A" if turn % 2 == 0 else "engine B"
        selection = choose_move(algorithm, stones, rng=rng)

        img, draw = _base_canvas("Nim Demo: Engine Self-Play")
        _draw_pile(draw, stones, 0, pile)
        _draw_selection(draw, side, selection)
        frames.append(img)

        stones -= selection.move
        img, draw = _base_canvas("Nim Demo: Engine Self-Play")
        _draw_pile(draw, stones, selection.move, pile)
        _draw_selection(draw, side, selection)
        if stones == 0:
            draw.text((40, 340), f"{side} takes the last stone", fill=COLORS["gold"], font=FONT_BODY)
        frames.append(img)
        turn += 1

    path = OUT_DIR / f"demo-self-play-{algorithm.value}.gif"
    _save_gif(path, frames, duration_ms=duration_ms)
    return path


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Generate Nim demo GIFs")
    parser.add_argument("--pile", type=int, default=INITIAL_PILE, help="Starting pile size")
    parser.add_argument("--seed", type=int, default=7, help="Seed for the timing jitter")
    parser.add_argument("--duration-ms", type=int, default=800, help="Frame duration")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    OUT_DIR.mkdir(parents=True, exist_ok=True)
    for algorithm in Algorithm:
        make_self_play(args.pile, algorithm, args.seed, args.duration_ms)
    print(f"wrote demo gifs in {OUT_DIR}")


if __name__ == "__main__":
    main()
