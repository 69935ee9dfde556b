"""CLI entry point for reporting module."""

import argparse
import json
import logging
import sys
from pathlib import Path

from src.core.config import settings
from src.reporting.filters import label_filters
from src.reporting.models import ReportMetadata
from src.reporting.variants import REPORT_REGISTRY, get_variant
from src.reporting.workflow import OUTPUT_FORMATS, generate_report

logger = logging.getLogger(__name__)


def load_input(path: Path) -> dict:
    """
    Read the export payload.

    The file holds either a JSON list of rows, or an object with "rows" and
    optional "filters" and "meta" keys.
    """
    payload = json.loads(path.read_text(encoding='utf-8'))
    if isinstance(payload, list):
        return {"rows": payload, "filters": {}, "meta": {}}
    if not isinstance(payload, dict):
        raise ValueError("Input must be a JSON list of rows or an object with a 'rows' key")
    return {
        "rows": payload.get("rows") or [],
        "filters": payload.get("filters") or {},
        "meta": payload.get("meta") or {},
    }


def parse_params(pairs) -> dict:
    """Turn repeated ``key=value`` arguments into a parameter mapping."""
    params = {}
    for pair in pairs or []:
        key, sep, value = pair.partition("=")
        if not sep:
            raise ValueError(f"Filter must look like key=value, got '{pair}'")
        if key in params:
            # Repeated keys behave like k[]=a&k[]=b
            existing = params[key]
            params[key] = (existing if isinstance(existing, list) else [existing]) + [value]
        else:
            params[key] = value
    return params


def main():
    """Main CLI function."""
    parser = argparse.ArgumentParser(
        description='Export ERP listings to Excel, HTML, PDF or the console',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Excel export of areas
  python -m src.reporting areas --input areas.json

  # All formats for requisitions, with the request filters that produced them
  python -m src.reporting requisiciones --input reqs.json --format all \\
      --filter tab=PENDIENTES --filter from=2025-01-01

  # Quick console table view
  python -m src.reporting empleados --input empleados.json --format table
        """
    )

    parser.add_argument(
        'report',
        choices=sorted(REPORT_REGISTRY),
        help='Report to export'
    )

    parser.add_argument(
        '--input',
        required=True,
        type=Path,
        help='JSON file with the rows (list) or {"rows", "filters", "meta"}'
    )

    parser.add_argument(
        '--format',
        choices=OUTPUT_FORMATS,
        default='excel',
        help='Output format (default: excel)'
    )

    parser.add_argument(
        '--filter',
        action='append',
        metavar='PARAM=VALUE',
        help='Request parameter used to produce the rows (repeatable)'
    )

    parser.add_argument('--title', help='Report title (default: variant title)')
    parser.add_argument('--subtitle', help='Report subtitle')
    parser.add_argument('--generated-by', help='Name shown as the report author')
    parser.add_argument('--generated-at', help='Generation timestamp text (default: now)')

    parser.add_argument(
        '--output-dir',
        default=str(settings.output_dir),
        help=f'Output directory (default: {settings.output_dir})'
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=getattr(logging, settings.log_level, logging.INFO),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        payload = load_input(args.input)
        variant = get_variant(args.report)

        # --filter values override the payload; declared defaults only fill gaps
        filters = dict(payload["filters"])
        params = parse_params(args.filter)
        for label, value in label_filters(variant.filter_labels, params, with_defaults=False).items():
            if value is not None:
                filters[label] = value
        for label, value in label_filters(variant.filter_labels, {}).items():
            if value is not None:
                filters.setdefault(label, value)

        meta_fields = dict(payload["meta"])
        overrides = {
            "title": args.title,
            "subtitle": args.subtitle,
            "generated_by": args.generated_by,
            "generated_at": args.generated_at,
        }
        meta_fields.update({k: v for k, v in overrides.items() if v is not None})

        generate_report(
            report_key=args.report,
            rows=payload["rows"],
            filters=filters,
            meta=ReportMetadata(**meta_fields),
            output_format=args.format,
            output_dir=args.output_dir,
        )
    except KeyboardInterrupt:
        print("\n\nExport cancelled.")
        sys.exit(1)
    except Exception as e:
        logger.exception("Export failed")
        print(f"\n\nError: {e}")
        sys.exit(1)


if __name__ == '__main__':
    main()
