"""rocket - 分阶段钩子编排器 + 应用模板启动器"""

__version__ = "0.3.0"
