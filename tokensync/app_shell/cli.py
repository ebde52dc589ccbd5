import argparse
import logging
import sys
from pathlib import Path

from tokensync.components.design_tokens import (
    BuildTokensInput,
    ValidateTokensInput,
    run_build,
    run_validate,
)
from tokensync.components.design_tokens.adapters import default_filesystem
from tokensync.rules.loader import load_rules, resolve_relative, resolve_rules_path
from tokensync.rules.models import BuildRules

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger("cli")


def get_rules(path: str | None) -> tuple[Path, BuildRules]:
    rules_path = resolve_rules_path(path)
    try:
        rules = load_rules(rules_path)
    except (FileNotFoundError, ValueError) as e:
        logger.error(str(e))
        sys.exit(1)
    return rules_path, rules


def handle_build(args: argparse.Namespace) -> None:
    rules_path, rules = get_rules(args.rules)

    inp = BuildTokensInput(
        source_path=resolve_relative(rules_path, rules.source.tokens_path),
        output_dir=resolve_relative(rules_path, rules.output.dir),
        theme_module=rules.output.theme_module,
        theme_json=rules.output.theme_json,
        css_file=rules.output.css_file,
        radius_fallback=rules.css.radius_fallback,
        font_fallback=rules.css.font_fallback,
    )
    result = run_build(inp, source=default_filesystem, writer=default_filesystem)

    if not result.success:
        for issue in result.errors:
            logger.error(f"[{issue.code}] {issue.message}")
        sys.exit(1)

    print(f"Built {result.token_count} tokens for {rules.project_slug}.")
    for path in result.written:
        print(f" - {path}")


def handle_validate(args: argparse.Namespace) -> None:
    if args.source:
        source_path = Path(args.source)
    else:
        rules_path, rules = get_rules(args.rules)
        source_path = resolve_relative(rules_path, rules.source.tokens_path)

    if not default_filesystem.exists(source_path):
        logger.error(f"Token export not found: {source_path}")
        sys.exit(1)

    try:
        data = default_filesystem.read_json(source_path)
    except (OSError, ValueError) as e:
        logger.error(f"Failed to read token export: {e}")
        sys.exit(1)

    result = run_validate(ValidateTokensInput(data=data))
    if not result.success:
        for issue in result.errors:
            logger.error(f"[{issue.code}] {issue.message}")
        sys.exit(1)

    print(f"{len(result.tokens)} valid tokens ({result.export_format.value} format).")


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Design token build tool")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # build
    build_parser = subparsers.add_parser("build", help="Generate theme and CSS artifacts")
    build_parser.add_argument("--rules", help="Path to tokensync.yaml")

    # validate
    validate_parser = subparsers.add_parser("validate", help="Validate a token export")
    validate_parser.add_argument("--rules", help="Path to tokensync.yaml")
    validate_parser.add_argument("--source", help="Token export to validate (overrides rules)")

    args = parser.parse_args(argv)

    if args.command == "build":
        handle_build(args)
    elif args.command == "validate":
        handle_validate(args)


if __name__ == "__main__":
    main()
