import argparse
import asyncio
import json
import sys

from compliance_audit.analysis.exceptions import AnalysisError
from compliance_audit.config.settings import Settings
from compliance_audit.logging.logger import Log
from compliance_audit.processor.exceptions import ProcessorError
from compliance_audit.processor.file_loader import FileLoader
from compliance_audit.processor.models import AnalysisRequest
from compliance_audit.processor.processor import build_processor


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="compliance-audit",
        description="Audit documents against regulations with an AI provider.",
    )
    parser.add_argument(
        "-r", "--regulation", action="append", default=[], metavar="FILE",
        help="regulation reference file (repeatable)",
    )
    parser.add_argument(
        "-d", "--document", action="append", default=[], metavar="FILE",
        help="document to audit (repeatable, at least one)",
    )
    parser.add_argument(
        "-c", "--category", action="append", default=[], metavar="NAME",
        help="audit category display name (repeatable, at least one)",
    )
    return parser.parse_args(argv)


def _print_progress(message: str, percent: int) -> None:
    print(f"[{percent:3d}%] {message}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    """Entry point: load files -> build processor -> run one analysis -> print JSON."""
    args = _parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)

    try:
        loader = FileLoader()
        request = AnalysisRequest.create(
            regulation_documents=loader.load_all(args.regulation),
            subject_documents=loader.load_all(args.document),
            categories=args.category,
        )
        processor = build_processor(settings)
        result = asyncio.run(processor.analyse(request, _print_progress))
    except (AnalysisError, ProcessorError, ValueError) as exc:
        Log.error(str(exc))
        print(f"Analysis failed: {exc}", file=sys.stderr)
        return 1

    print(json.dumps(result.to_dict(), indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
