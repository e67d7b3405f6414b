#!/usr/bin/env python3
"""
PNG Modifier
Interactive single-shot tool: pick a PNG, pick an action, get modified.png.
"""

import os
import logging
from dotenv import load_dotenv

# Load environment variables first
load_dotenv()

# --- Centralized Logging Configuration ---
# This should be the first thing to run to ensure all modules use the same config.
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "WARNING").upper(),
    format='%(asctime)s - %(name)-25s - %(levelname)-8s - %(message)s',
    datefmt='%H:%M:%S'
)
# ───────────────────────────────────────────

import sys
from pathlib import Path

from models.menu_choice import MenuChoice
from models.errors import ImageDecodeError, ImageEncodeError, InvalidMenuChoiceError
from pipeline.modify_image import OUTPUT_PATH, modify_image, parse_menu_choice
from services.image_service import ImageService

logger = logging.getLogger(__name__)

PAUSE_ON_EXIT = os.getenv("PAUSE_ON_EXIT", "false").strip().lower() in ("1", "true", "yes")

EXIT_OK = 0
EXIT_FAILURE = 1


def _print_menu() -> None:
    print()
    print("What do you want to do with the image?")
    for choice in MenuChoice:
        print(f"{choice.value}. {choice.label}")


def _read_angle() -> float:
    raw = input("Enter the rotation angle: ")
    try:
        return float(raw.strip())
    except ValueError as err:
        raise ValueError(f"Invalid rotation angle: {raw!r}") from err


def _wait_for_enter() -> None:
    try:
        input("Press Enter to exit the program.")
    except EOFError:
        logger.debug("Input closed while waiting for Enter")


def main(
    output_path: str | Path = OUTPUT_PATH,
    pause_on_exit: bool = PAUSE_ON_EXIT,
    image_service: ImageService | None = None,
) -> int:
    image_service = image_service or ImageService()

    print("** ONLY .png files are supported ** ")
    try:
        input_path = input("Enter the file path: ").strip()
        try:
            img = image_service.load(input_path)
        except ImageDecodeError as err:
            print(f"Error while decoding: {err}")
            return EXIT_FAILURE

        _print_menu()
        try:
            choice = parse_menu_choice(input("Enter the corresponding number: "))
        except InvalidMenuChoiceError as err:
            logger.debug(err)
            print("Invalid choice")
            return EXIT_FAILURE

        angle = None
        if choice is MenuChoice.ROTATE:
            try:
                angle = _read_angle()
            except ValueError as err:
                print(err)
                return EXIT_FAILURE

        try:
            saved = modify_image(img, choice, angle, output_path=output_path,
                                 image_service=image_service)
        except ImageEncodeError as err:
            print(f"Error while encoding: {err}")
            return EXIT_FAILURE

        print()
        print(f"Image saved as '{saved.name}'.")
        print()
    except (EOFError, KeyboardInterrupt):
        print()
        logger.info("Input closed before the run completed")
        return EXIT_FAILURE

    if pause_on_exit:
        _wait_for_enter()
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
