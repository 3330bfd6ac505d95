#!/usr/bin/env python3
import argparse, json, sys, pathlib
from jsonschema import Draft7Validator
from jsonschema.exceptions import SchemaError

SUPPORTED_KEYWORDS = {
    "$schema", "title", "description",
    "type", "properties", "additionalProperties",
    "format", "pattern", "minLength",
    "items", "minItems", "maxItems",
}

def unsupported_keywords(node, path="#"):
    """Yield (path, keyword) for keywords the gitinfo validator would ignore."""
    if not isinstance(node, dict):
        return
    for key in node:
        if key not in SUPPORTED_KEYWORDS:
            yield path, key
    for name, sub in (node.get("properties") or {}).items():
        yield from unsupported_keywords(sub, f"{path}/properties/{name}")
    items = node.get("items")
    if isinstance(items, list):
        for i, sub in enumerate(items):
            yield from unsupported_keywords(sub, f"{path}/items/{i}")
    else:
        yield from unsupported_keywords(items, f"{path}/items")

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--schema", default=None)
    args = ap.parse_args(argv)
    default = pathlib.Path(__file__).parent / ".." / "gitinfo" / "schemas" / "gitinfo.schema.json"
    schema_path = pathlib.Path(args.schema) if args.schema else default.resolve()
    schema = json.loads(schema_path.read_text(encoding="utf-8"))
    try:
        Draft7Validator.check_schema(schema)
    except SchemaError as e:
        print("[ERROR] Schema invalid:", e.message)
        sys.exit(2)
    bad = list(unsupported_keywords(schema))
    if bad:
        for path, key in bad:
            print(f"[ERROR] Unsupported keyword {key!r} at {path}")
        sys.exit(2)
    print("[OK] Schema valid:", schema_path)

if __name__ == "__main__":
    main()
