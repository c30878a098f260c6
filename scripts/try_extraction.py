import argparse
import base64
import json
import logging
import mimetypes
import pathlib
import sys

ROOT = pathlib.Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from recipebox.services.errors import ServiceError
from recipebox.services.extraction import (
    extract_recipe_from_image,
    extract_recipe_from_url,
    generate_recipe,
)


def main() -> int:
    parser = argparse.ArgumentParser(description="Quick extraction smoke test against the live model")
    sub = parser.add_subparsers(dest="mode", required=True)

    gen = sub.add_parser("generate", help="Generate from ingredients")
    gen.add_argument("ingredients", nargs="*")
    gen.add_argument("--restriction", action="append", default=[])
    gen.add_argument("--cuisine", default=None)
    gen.add_argument("--time", type=int, default=30)
    gen.add_argument("--servings", type=int, default=2)
    gen.add_argument("--kid-friendly", action="store_true")

    url = sub.add_parser("url", help="Extract from a recipe page")
    url.add_argument("url")

    image = sub.add_parser("image", help="Extract from a photo of a recipe card")
    image.add_argument("path", type=pathlib.Path)

    args = parser.parse_args()
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s [%(name)s] %(message)s")

    try:
        if args.mode == "generate":
            recipe = generate_recipe(
                args.ingredients,
                args.restriction,
                cuisine=args.cuisine,
                time_budget_minutes=args.time,
                servings=args.servings,
                kid_friendly=args.kid_friendly,
            )
        elif args.mode == "url":
            recipe = extract_recipe_from_url(args.url)
        else:
            encoded = base64.b64encode(args.path.read_bytes()).decode("ascii")
            media_type = mimetypes.guess_type(args.path.name)[0] or "image/jpeg"
            recipe = extract_recipe_from_image(encoded, media_type)
    except ServiceError as error:
        print(f"{type(error).__name__}: {error}", file=sys.stderr)
        return 1

    print(json.dumps(recipe.to_wire(), indent=2, ensure_ascii=False))
    print(f"total time: {recipe.total_time_minutes} min")
    return 0


if __name__ == "__main__":
    sys.exit(main())
