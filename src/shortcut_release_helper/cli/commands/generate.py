"""Release notes generation command."""

from __future__ import annotations

import argparse

from rich.console import Console

from shortcut_release_helper.cli.progress.rich import RichReleaseProgress
from shortcut_release_helper.contracts.release import ReleaseResult
from shortcut_release_helper.sdk import ReleaseOptions


def _options_from_args(args: argparse.Namespace) -> ReleaseOptions:
    return ReleaseOptions.from_lists(
        name=args.name,
        version=args.version,
        description=args.description,
        exclude_story_ids=args.exclude_story_id,
        exclude_story_labels=args.exclude_story_label,
        include_story_labels=args.include_story_label,
        include_unparsed_commits=not args.exclude_unparsed_commits,
    )


def format_release_summary(result: ReleaseResult, output_file: str) -> str:
    content = result.content
    lines = [
        "",
        f"[bold]Total stories[/bold]: [green]{len(content.stories)}[/green]",
        f"[bold]Total epics[/bold]: [green]{len(content.epics)}[/green]",
    ]
    for repo, commits in sorted(content.unparsed_commits.items()):
        if commits:
            lines.append(f"[bold]Total unparsed commits in [blue]{repo}[/blue][/bold]: [red]{len(commits)}[/red]")
    for failure in content.failures:
        lines.append(f"[yellow]Skipped {failure.kind} {failure.entity_id}[/yellow]: {failure.reason}")
    lines.append("")
    lines.append(f"Release notes written to [bold]{output_file}[/bold]")
    lines.append("")
    return "\n".join(lines)


async def run_generate(args: argparse.Namespace, console: Console | None = None) -> ReleaseResult:
    import shortcut_release_helper.cli as cli

    console = console or Console()
    cli.load_env_file(args.env_file)
    config = cli.load_config(args.config)
    options = _options_from_args(args)

    if not args.verbose:
        with RichReleaseProgress() as progress:
            helper = await cli.ReleaseHelper.from_config(config, renderer_name=args.format, progress=progress)
            result = await helper.build_release(options)
    else:
        helper = await cli.ReleaseHelper.from_config(config, renderer_name=args.format)
        result = await helper.build_release(options)

    output_path = cli.write_release(args.output_file, helper.render(result.release))
    console.print(cli._format_summary(result, str(output_path)), highlight=False)
    return result


__all__ = ["format_release_summary", "run_generate"]
