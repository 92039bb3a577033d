"""rocket 命令行接口

CLI 按领域拆分为子模块，每个模块注册自己的命令到 main group。
"""

import os

import click

from rocket import __version__
from rocket.utils.logger import setup_logging


@click.group()
@click.version_option(version=__version__)
def main() -> None:
    """rocket - 分阶段应用模板启动器"""
    setup_logging(
        level=os.getenv("ROCKET_LOG_LEVEL", "WARNING"),
        json_output=os.getenv("ROCKET_LOG_JSON", "") == "1",
    )


# 注册各领域子命令
from rocket.cli.cmd_launch import register as _reg_launch  # noqa: E402

_reg_launch(main)
