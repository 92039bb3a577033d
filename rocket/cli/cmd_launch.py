"""启动命令：launch, steps"""

from __future__ import annotations

import click
import yaml

from rocket.core.config import Config, init_config
from rocket.core.exceptions import RocketError
from rocket.launcher import build_orchestrator, launch
from rocket.orchestrator import RunReport
from rocket.services.container import ServiceContainer


def register(main: click.Group) -> None:
    """注册启动相关命令"""
    main.add_command(launch_cmd)
    main.add_command(steps_cmd)


def _load_config(
    config_path: str, *,
    project_dir: str | None = None,
    features: tuple[str, ...] = (),
    answers: tuple[str, ...] = (),
) -> Config:
    try:
        cfg = init_config(config_path)
    except (RocketError, yaml.YAMLError, ValueError, TypeError, OSError) as exc:
        raise click.ClickException(f"配置加载失败: {exc}") from exc
    if project_dir is not None:
        cfg.project_dir = project_dir
    if features:
        cfg.features = list(features)
    cfg.answers.update(_parse_kv_pairs(answers))
    return cfg


def _parse_kv_pairs(pairs: tuple[str, ...]) -> dict[str, str]:
    """解析 key=value 参数对"""
    result: dict[str, str] = {}
    for p in pairs:
        k, sep, v = p.partition("=")
        if not sep or not k.strip():
            raise click.BadParameter(
                f"格式应为 key=value: {p}", param_hint="--answer",
            )
        result[k.strip()] = v.strip()
    return result


def _print_report(report: RunReport) -> None:
    """打印编排执行报告"""
    click.echo("\n=== 编排执行报告 ===")
    for r in report.records:
        where = f"{r.phase.value}/{r.slot.value if r.slot else 'body'}"
        click.echo(f"  [{r.status:6s}] {where:18s} {r.name}")
    click.echo(report.summary())


@click.command(name="launch")
@click.argument("project_dir", default=".")
@click.option("-c", "--config", "config_path", default="rocket.yml", help="配置文件路径")
@click.option("--feature", multiple=True, help="功能模块（可多次，覆盖配置）")
@click.option("--answer", multiple=True, help="预置答案 key=value（可多次）")
def launch_cmd(
    project_dir: str, config_path: str,
    feature: tuple[str, ...], answer: tuple[str, ...],
) -> None:
    """对生成好的工程执行 preflight → launch → postflight"""
    cfg = _load_config(
        config_path, project_dir=project_dir, features=feature, answers=answer,
    )
    try:
        report = launch(ServiceContainer(config=cfg))
    except RocketError as exc:
        raise click.ClickException(str(exc)) from exc

    _print_report(report)
    if not report.success:
        raise SystemExit(1)


@click.command(name="steps")
@click.option("-c", "--config", "config_path", default="rocket.yml", help="配置文件路径")
@click.option("--feature", multiple=True, help="功能模块（可多次，覆盖配置）")
def steps_cmd(config_path: str, feature: tuple[str, ...]) -> None:
    """列出执行计划（不执行）"""
    cfg = _load_config(config_path, features=feature)
    try:
        orchestrator = build_orchestrator(ServiceContainer(config=cfg))
    except RocketError as exc:
        raise click.ClickException(str(exc)) from exc
    for i, step in enumerate(orchestrator.plan(), start=1):
        click.echo(f"  {i:2d}. {step.label:18s} {step.name}")
