# main.py
import argparse
import json
import sys
from pathlib import Path

from fast_delivery.app.build import build
from fast_delivery.io.config import load_config


def run(config_path: str | None, request_path: str) -> dict:
    cfg = load_config(config_path) if config_path else None
    app = build(cfg)
    request = json.loads(Path(request_path).read_text(encoding="utf-8"))
    return app.quotes.quote(request).model_dump(mode="json")


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Quote a delivery shipment.")
    parser.add_argument("request", help="JSON file with packages, currency_code, departure, destination")
    parser.add_argument("--config", default=None, help="JSON app config (defaults to built-in tariff)")
    args = parser.parse_args(argv)

    response = run(args.config, args.request)
    json.dump(response, sys.stdout, indent=2)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
