"""Main CLI interface for Coding Analytics."""

import argparse
import json
import logging
import sys
from typing import Any, Dict, List, Optional

from coding_analytics.config.settings import Settings
from coding_analytics.core.analyzer import CodingAnalyzer
from coding_analytics.core.search import propose_codings, search_transcripts
from coding_analytics.models.analysis import AnalysisRequest, AnalysisType
from coding_analytics.services.report_generator import ReportGenerator


def setup_logging(log_level: str = "INFO", log_file: Optional[str] = None):
    """Setup logging configuration."""
    level = getattr(logging, log_level.upper(), logging.INFO)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=handlers
    )


def create_parser() -> argparse.ArgumentParser:
    """Create command-line argument parser."""
    parser = argparse.ArgumentParser(
        description="Coding Analytics - derived views over qualitative coding data",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Coding statistics per question
  coding-analytics run project.json --type stats

  # Co-occurrence with a config
  coding-analytics run project.json --type cooccurrence --config '{"questionIds": ["q1", "q3"]}'

  # Several analyses from a request file, with Excel export
  coding-analytics batch project.json requests.json --report

  # Propose codings for every match of a pattern
  coding-analytics autocode project.json --pattern "fund\\w+" --mode regex --question q2
        """
    )

    subparsers = parser.add_subparsers(dest='command', help='Available commands')

    # Run command
    run_parser = subparsers.add_parser('run', help='Run one analysis')
    run_parser.add_argument('input', help='Project file (.json, .xlsx) or directory of tables')
    run_parser.add_argument('-t', '--type', required=True,
                            choices=[t.value for t in AnalysisType],
                            help='Analysis type')
    run_parser.add_argument('-c', '--config', default='{}',
                            help='Analysis config as JSON, or @path to a JSON file')
    run_parser.add_argument('-o', '--output', help='Write the result JSON to this file')

    # Batch command
    batch_parser = subparsers.add_parser('batch', help='Run several analyses from a request file')
    batch_parser.add_argument('input', help='Project file (.json, .xlsx) or directory of tables')
    batch_parser.add_argument('requests', help='JSON file with a list of {nodeType, config, name}')
    batch_parser.add_argument('--report', action='store_true',
                              help='Write JSON and Excel reports to the output directory')
    batch_parser.add_argument('--no-excel', action='store_true',
                              help='Skip the Excel workbook when reporting')

    # Autocode command
    autocode_parser = subparsers.add_parser('autocode', help='Propose codings from search matches')
    autocode_parser.add_argument('input', help='Project file (.json, .xlsx) or directory of tables')
    autocode_parser.add_argument('--pattern', required=True, help='Search text or pattern')
    autocode_parser.add_argument('--mode', default='literal', choices=['literal', 'pattern', 'regex'],
                                 help='Search mode (default: literal)')
    autocode_parser.add_argument('--question', required=True, help='Question id for the proposals')
    autocode_parser.add_argument('--transcripts', nargs='*', help='Restrict to these transcript ids')

    # Config command
    config_parser = subparsers.add_parser('config', help='Configuration management')
    config_subparsers = config_parser.add_subparsers(dest='config_action')

    config_subparsers.add_parser('show', help='Show current configuration')
    config_subparsers.add_parser('test', help='Test configuration')

    # Global options
    parser.add_argument('--log-level', choices=['DEBUG', 'INFO', 'WARNING', 'ERROR'],
                        default=None, help='Logging level (default: LOG_LEVEL or INFO)')
    parser.add_argument('--log-file', help='Log file path')
    parser.add_argument('--env-file', help='Environment file path')

    return parser


def parse_config(raw: str) -> Dict[str, Any]:
    """Parse an inline JSON config or load it from ``@path``."""
    if raw.startswith('@'):
        with open(raw[1:], 'r', encoding='utf-8') as f:
            config = json.load(f)
    else:
        config = json.loads(raw)

    if not isinstance(config, dict):
        raise ValueError("Config must be a JSON object")
    return config


def load_requests(path: str) -> List[AnalysisRequest]:
    """Load a list of analysis requests from a JSON file."""
    with open(path, 'r', encoding='utf-8') as f:
        payload = json.load(f)

    if isinstance(payload, dict):
        payload = payload.get("requests", [])
    if not isinstance(payload, list):
        raise ValueError("Request file must hold a list of requests")

    return [AnalysisRequest.from_dict(item) for item in payload]


def write_json(data: Any, output: Optional[str]) -> None:
    """Write JSON to a file, or to stdout when no file is given."""
    text = json.dumps(data, indent=2, ensure_ascii=False)
    if output:
        with open(output, 'w', encoding='utf-8') as f:
            f.write(text)
        print(f"✅ Result saved to: {output}")
    else:
        print(text)


def command_run(args, settings: Settings):
    """Handle run command."""
    try:
        request = AnalysisRequest(
            analysis_type=AnalysisType.parse(args.type),
            config=parse_config(args.config),
            name=args.type,
        )
        analyzer = CodingAnalyzer.from_file(args.input, settings)
        result = analyzer.run(request)
        write_json(result, args.output)
        return 0

    except Exception as e:
        print(f"❌ Analysis failed: {str(e)}", file=sys.stderr)
        logging.error(f"Analysis error: {str(e)}", exc_info=True)
        return 1


def command_batch(args, settings: Settings):
    """Handle batch command."""
    try:
        requests = load_requests(args.requests)
        analyzer = CodingAnalyzer.from_file(args.input, settings)
        results = analyzer.run_many(requests)

        print("\n📊 Analysis Summary:")
        for line in ReportGenerator.summarize(results):
            print(f"  • {line}")

        stats = analyzer.get_run_statistics()
        print(f"  • Succeeded: {stats['total_runs']}, failed: {stats['failed_runs']}")

        if args.report:
            generator = ReportGenerator(settings.output_dir)
            report_files = generator.generate_report(
                results,
                {r.name: r.analysis_type for r in requests},
                dataset=analyzer.dataset,
                export_excel=settings.export_excel and not args.no_excel,
            )
            print("Reports generated:")
            for report_type, file_path in report_files.items():
                print(f"  • {report_type.capitalize()}: {file_path}")
        else:
            write_json(results, None)

        return 0 if stats['failed_runs'] == 0 else 1

    except Exception as e:
        print(f"❌ Batch failed: {str(e)}", file=sys.stderr)
        logging.error(f"Batch error: {str(e)}", exc_info=True)
        return 1


def command_autocode(args, settings: Settings):
    """Handle autocode command."""
    try:
        analyzer = CodingAnalyzer.from_file(args.input, settings)
        matches = search_transcripts(
            analyzer.dataset.transcripts,
            args.pattern,
            args.mode,
            args.transcripts,
        )
        proposals = propose_codings(matches, args.question)
        write_json({"created": len(proposals), "codings": proposals}, None)
        return 0

    except Exception as e:
        print(f"❌ Auto-code failed: {str(e)}", file=sys.stderr)
        logging.error(f"Auto-code error: {str(e)}", exc_info=True)
        return 1


def command_config(args, settings: Settings):
    """Handle config command."""
    if args.config_action == 'show':
        print("⚙️  Current Configuration:")
        print(f"  • Data Encoding: {settings.data_encoding}")
        print(f"  • Default Cluster Count: {settings.default_cluster_count}")
        print(f"  • Cluster Seed: {settings.cluster_seed}")
        print(f"  • Output Directory: {settings.output_dir}")
        print(f"  • Export Excel: {settings.export_excel}")
        print(f"  • Show Progress: {settings.show_progress}")
        print(f"  • Log Level: {settings.log_level}")
        return 0

    elif args.config_action == 'test':
        print("🧪 Testing configuration...")
        try:
            settings.validate()
            print("✅ Configuration is valid!")
            return 0
        except Exception as e:
            print(f"❌ Configuration error: {str(e)}")
            return 1

    return 0


def main(argv: Optional[List[str]] = None):
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    # Show help if no command specified
    if not args.command:
        parser.print_help()
        return 0

    try:
        settings = Settings.from_env(args.env_file)
        setup_logging(args.log_level or settings.log_level, args.log_file)

        if args.command == 'run':
            return command_run(args, settings)
        elif args.command == 'batch':
            return command_batch(args, settings)
        elif args.command == 'autocode':
            return command_autocode(args, settings)
        elif args.command == 'config':
            return command_config(args, settings)
        else:
            print(f"Unknown command: {args.command}")
            return 1

    except Exception as e:
        print(f"❌ Error: {str(e)}")
        logging.error(f"Main error: {str(e)}", exc_info=True)
        return 1


if __name__ == '__main__':
    sys.exit(main())
