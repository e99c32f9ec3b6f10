"""countup CLI - watch numbers count from one value to another."""

import asyncio
import logging
import sys

import click

from .animator import StepwiseAnimator
from .config import ConfigManager
from .formatters import FORMATTERS, get_formatter
from .planner import plan as plan_steps
from .scheduling import AsyncioScheduler
from .ui import LiveSink, console, render_error, render_plan_table


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


def _resolve_settings(config: ConfigManager, steps, interval, fmt) -> dict:
    """Merge command-line overrides over the configured defaults."""
    settings = config.get_animation_config()
    if steps is not None:
        settings["steps"] = steps
    if interval is not None:
        settings["tick_interval_ms"] = interval
    if fmt is not None:
        settings["formatter"] = fmt

    if settings["tick_interval_ms"] <= 0:
        raise click.BadParameter("interval must be positive", param_hint="--interval")
    try:
        settings["formatter_fn"] = get_formatter(settings["formatter"])
    except KeyError as e:
        raise click.ClickException(e.args[0])
    return settings


async def _drive(animator: StepwiseAnimator, sink: LiveSink, target: int, focused: bool, then, after_ms: int) -> None:
    sink.direction = _sign(target - animator.current_value)
    animator.notify_target_changed(target, focused=focused)

    if then is not None:
        await asyncio.sleep(after_ms / 1000)
        sink.direction = _sign(then - animator.current_value)
        animator.notify_target_changed(then, focused=focused)

    while animator.is_animating:
        await asyncio.sleep(animator.tick_interval_ms / 1000)


# CLI Commands
@click.group()
@click.option("--config", "config_path", envvar="COUNTUP_CONFIG", help="Path to config.yaml")
@click.option("--verbose", "-v", is_flag=True, help="Log animator events")
@click.pass_context
def cli(ctx, config_path, verbose):
    """COUNTUP - stepwise number animations in the terminal."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")
    ctx.obj = ConfigManager(config_path)


@cli.command()
@click.argument("start", type=int)
@click.argument("target", type=int)
@click.option("--steps", "-s", type=int, help="Approximate number of ticks")
@click.option("--interval", "-i", type=int, help="Milliseconds between ticks")
@click.option("--format", "-f", "fmt", type=click.Choice(sorted(FORMATTERS)), help="Value formatter")
@click.option("--then", "then", type=int, help="Retarget to this value mid-animation")
@click.option("--after", type=int, default=100, show_default=True, help="Milliseconds before --then fires")
@click.option("--focused", is_flag=True, help="Skip the animation and show TARGET at once")
@click.pass_obj
def run(config, start, target, steps, interval, fmt, then, after, focused):
    """Animate a count from START to TARGET."""
    settings = _resolve_settings(config, steps, interval, fmt)
    label = config.get_display_config()["label"]

    try:
        with LiveSink(console=console, label=str(label)) as sink:
            animator = StepwiseAnimator(
                start,
                sink,
                AsyncioScheduler(),
                steps=settings["steps"],
                tick_interval_ms=settings["tick_interval_ms"],
                formatter=settings["formatter_fn"],
            )
            sink(animator.formatter(start))
            try:
                asyncio.run(_drive(animator, sink, target, focused, then, after))
            finally:
                animator.dispose()
    except KeyboardInterrupt:
        sys.exit(130)
    except Exception as e:
        render_error(str(e))
        sys.exit(1)


@cli.command()
@click.argument("start", type=int)
@click.argument("target", type=int)
@click.option("--steps", "-s", type=int, help="Approximate number of ticks")
@click.option("--format", "-f", "fmt", type=click.Choice(sorted(FORMATTERS)), help="Value formatter")
@click.pass_obj
def plan(config, start, target, steps, fmt):
    """Print every tick of a count from START to TARGET."""
    settings = _resolve_settings(config, steps, None, fmt)
    animation_plan = plan_steps(start, target, settings["steps"])

    if animation_plan.is_noop:
        console.print("Nothing to animate: start equals target", style="dim")
        return

    console.print(render_plan_table(animation_plan, settings["formatter_fn"]))
    console.print(
        f"{animation_plan.tick_count} ticks, step {animation_plan.step_size:+d}, "
        f"~{animation_plan.tick_count * settings['tick_interval_ms']}ms",
        style="dim",
    )


@cli.command()
@click.pass_obj
def config(config):
    """Show configuration."""
    animation = config.get_animation_config()

    console.print(f"Config file: {config.config_path}")
    console.print(f"Steps: {animation['steps']}")
    console.print(f"Tick interval: {animation['tick_interval_ms']}ms")
    console.print(f"Formatter: {animation['formatter']}")
    console.print(f"Label: {config.get_display_config()['label']}")
