"""Command-line interface for the blog SEO scorer."""

import json
import sys
from dataclasses import replace
from pathlib import Path

from blog_seo.blog_service import BlogSEOService
from blog_seo.config import Config, ScoringWeights
from blog_seo.document import load_blog_post
from blog_seo.logging_config import get_logger, setup_logging
from blog_seo.score_generator import SEOScoreGenerator

logger = get_logger(__name__)


def load_weights(args) -> ScoringWeights:
    """Weights from --weights-file, else from SEO_WEIGHT_* variables.

    Exits with status 1 when the given file is missing or invalid.
    """
    weights_file = getattr(args, "weights_file", None)
    if not weights_file:
        return ScoringWeights.from_env()

    if not Path(weights_file).is_file():
        print(f"Error: weights file not found: {weights_file}", file=sys.stderr)
        sys.exit(1)

    try:
        return ScoringWeights.from_file(weights_file)
    except (OSError, ValueError) as e:
        print(f"Error: invalid weights file {weights_file}: {e}", file=sys.stderr)
        sys.exit(1)


def build_service(args) -> BlogSEOService:
    """Create the service from environment config and the scoring weights."""
    config = Config.from_env()
    weights = load_weights(args)
    return BlogSEOService(generator=SEOScoreGenerator(weights=weights), config=config)


def write_output(args, data) -> None:
    """Print JSON or write it to --output-file."""
    text = json.dumps(data, indent=2)
    output_file = getattr(args, "output_file", None)
    if output_file:
        Path(output_file).write_text(text + "\n")
        print(f"Results written to {output_file}")
    else:
        print(text)


def print_analysis(result: dict):
    """Print a publish analysis in a formatted way.

    Args:
        result: Output of BlogSEOService.analyze_blog_before_publish
    """
    score = result["seoScore"]
    metadata = result["metadata"]
    status = "PASSED" if score["passed"] else "NEEDS WORK"

    print(f"\n{'=' * 60}")
    print(f"SEO Analysis for: {metadata['slug'] or '(untitled)'}")
    print(f"{'=' * 60}")
    print(f"\nOverall Score: {score['overallScore']}/100 ({status})")
    print(f"Words: {metadata['wordCount']}  Reading time: {metadata['readingTime']} min")

    print("\nCategory Scores:")
    for name, category in score["categoryScores"].items():
        print(f"  • {name.capitalize()}: {category['score']}/{category['maxScore']}")

    if score["recommendations"]:
        print("\nRecommendations:")
        for rec in score["recommendations"]:
            print(f"  [{rec['priority'].upper()}] {rec['category']}")
            for issue in rec["issues"]:
                print(f"    - {issue}")

    print(f"\n{'=' * 60}\n")


def analyze_command(args):
    """Score an HTML blog post."""
    try:
        post = load_blog_post(args.file)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        sys.exit(1)

    overrides = {
        "title": args.title,
        "meta_description": args.meta_description,
        "focus_keyword": args.keyword,
        "slug": args.slug,
    }
    post = replace(post, **{k: v for k, v in overrides.items() if v is not None})

    service = build_service(args)
    result = service.analyze_blog_before_publish(post)

    if "error" in result:
        print(f"Error: {result['error']}: {result['message']}", file=sys.stderr)
        sys.exit(1)

    if args.output == "json":
        write_output(args, result)
    else:
        print_analysis(result)


def keywords_command(args):
    """Suggest focus keywords for an HTML blog post."""
    try:
        post = load_blog_post(args.file)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        sys.exit(1)

    title = args.title if args.title is not None else post.title
    suggestions = build_service(args).extract_keyword_suggestions(post.content, title)

    if args.output == "json":
        write_output(args, [s.to_dict() for s in suggestions])
        return

    if not suggestions:
        print("No keyword suggestions found.")
        return
    for suggestion in suggestions:
        print(f"  {suggestion.count:>4}  {suggestion.word}")


def slug_command(args):
    """Print the slug for a title."""
    print(build_service(args).generate_slug(args.title))


def readability_command(args):
    """Print Flesch Reading Ease for an HTML blog post."""
    try:
        post = load_blog_post(args.file)
    except OSError as e:
        print(f"Error: cannot read {args.file}: {e}", file=sys.stderr)
        sys.exit(1)

    report = build_service(args).calculate_flesch_reading_ease(post.content)

    if args.output == "json":
        write_output(args, report.to_dict())
        return

    print(f"Flesch Reading Ease: {report.score:.1f} ({report.grade})")
    print(f"  Words: {report.word_count}")
    print(f"  Sentences: {report.sentence_count}")
    print(f"  Avg words/sentence: {report.avg_words_per_sentence}")
    print(f"  Avg syllables/word: {report.avg_syllables_per_word}")


def guidelines_command(args):
    """Print length targets and tips for a content type."""
    guidelines = build_service(args).get_content_type_recommendations(args.content_type)

    if args.output == "json":
        write_output(args, guidelines.to_dict())
        return

    print(f"Guidelines for {guidelines.content_type} posts")
    print(f"  Length: {guidelines.min_words}-{guidelines.max_words} words")
    print("  Sections: " + ", ".join(guidelines.recommended_sections))
    print("  Tips:")
    for tip in guidelines.seo_tips:
        print(f"    • {tip}")


def _add_output_arguments(parser, with_file: bool = True):
    parser.add_argument(
        "--output",
        "-o",
        choices=["text", "json"],
        default="text",
        help="Output format (default: text)",
    )
    if with_file:
        parser.add_argument(
            "--output-file",
            "-f",
            help="Write output to file (only for json format)",
        )


def build_parser():
    """Create the argument parser with all subcommands."""
    import argparse

    parser = argparse.ArgumentParser(
        description="Blog SEO - Score blog posts for SEO before publishing"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default=None,
        help="Set logging verbosity (default: LOG_LEVEL or INFO)",
    )
    parser.add_argument(
        "--log-file",
        help="Write logs to file in addition to console",
    )
    parser.add_argument(
        "--weights-file",
        help="JSON file with category weights (default: SEO_WEIGHT_* env vars)",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    analyze_parser = subparsers.add_parser(
        "analyze", help="Score an HTML blog post for SEO."
    )
    analyze_parser.add_argument("file", help="HTML file with the post")
    analyze_parser.add_argument("--keyword", "-k", help="Focus keyword (overrides keywords meta)")
    analyze_parser.add_argument("--title", help="Post title (overrides <title>)")
    analyze_parser.add_argument("--meta-description", help="Meta description override")
    analyze_parser.add_argument("--slug", help="URL slug (overrides canonical link)")
    _add_output_arguments(analyze_parser)
    analyze_parser.set_defaults(func=analyze_command)

    keywords_parser = subparsers.add_parser(
        "keywords", help="Suggest focus keywords from frequent words."
    )
    keywords_parser.add_argument("file", help="HTML file with the post")
    keywords_parser.add_argument("--title", help="Post title (overrides <title>)")
    _add_output_arguments(keywords_parser)
    keywords_parser.set_defaults(func=keywords_command)

    slug_parser = subparsers.add_parser("slug", help="Generate a URL slug from a title.")
    slug_parser.add_argument("title", help="Post title")
    slug_parser.set_defaults(func=slug_command)

    readability_parser = subparsers.add_parser(
        "readability", help="Calculate Flesch Reading Ease."
    )
    readability_parser.add_argument("file", help="HTML file with the post")
    _add_output_arguments(readability_parser)
    readability_parser.set_defaults(func=readability_command)

    guidelines_parser = subparsers.add_parser(
        "guidelines", help="Show guidelines for a content type."
    )
    guidelines_parser.add_argument(
        "content_type",
        nargs="?",
        default="blog",
        help="blog, tutorial or review (default: blog)",
    )
    _add_output_arguments(guidelines_parser, with_file=False)
    guidelines_parser.set_defaults(func=guidelines_command)

    return parser


def main(argv=None):
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(Config.from_env(), level=args.log_level, log_file=args.log_file)

    if hasattr(args, "func"):
        logger.debug("Running %s command", args.command)
        args.func(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
