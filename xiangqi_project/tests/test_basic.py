"""
基础测试模块

测试项目的基本功能、导入和命令行入口。
"""

import pytest
from pathlib import Path
from click.testing import CliRunner

project_root = Path(__file__).parent.parent.parent


def test_project_import():
    """测试项目主模块是否可以正常导入"""
    try:
        import xiangqi_project
        assert xiangqi_project.__version__ == "0.1.0"
        assert xiangqi_project.__author__ == "Xiangqi Rules Team"
    except ImportError as e:
        pytest.fail(f"无法导入xiangqi_project模块: {e}")


def test_submodules_import():
    """测试子模块是否可以正常导入"""
    try:
        from xiangqi_project.src import xiangqi_rules_engine
        from xiangqi_project.src.xiangqi_rules_engine import rules_engine, game_interface, config, utils

        assert xiangqi_rules_engine.__version__ == "0.1.0"
        assert hasattr(rules_engine, 'RuleEngine')
        assert hasattr(game_interface, 'GameSession')
        assert hasattr(config, 'ConfigManager')
        assert hasattr(utils, 'setup_logger')

    except ImportError as e:
        pytest.fail(f"无法导入子模块: {e}")


def test_config_file_exists():
    """测试配置文件是否存在"""
    config_path = project_root / "xiangqi_project" / "configs" / "default.yaml"
    assert config_path.exists(), "默认配置文件不存在"


def test_main_entry_point():
    """测试主入口文件是否存在"""
    assert (project_root / "xiangqi_project" / "main.py").exists()


class TestCli:
    """命令行接口的测试"""

    def setup_method(self):
        """每个测试方法前的设置"""
        from xiangqi_project.main import cli
        self.cli = cli
        self.runner = CliRunner()

    def test_info(self):
        """测试info命令"""
        result = self.runner.invoke(self.cli, ['info'])
        assert result.exit_code == 0
        assert "Xiangqi Rules" in result.output

    def test_moves(self):
        """测试moves命令列出合法走法"""
        result = self.runner.invoke(self.cli, ['moves', '9', '1'])
        assert result.exit_code == 0
        assert "共 2 步" in result.output

    def test_moves_empty_square(self):
        """测试空位报错"""
        result = self.runner.invoke(self.cli, ['moves', '5', '5'])
        assert result.exit_code != 0

    def test_status(self):
        """测试status命令"""
        result = self.runner.invoke(self.cli, ['status'])
        assert result.exit_code == 0
        assert "ongoing" in result.output

    def test_status_with_config(self):
        """测试使用配置文件"""
        config_path = project_root / "xiangqi_project" / "configs" / "default.yaml"
        result = self.runner.invoke(self.cli, ['--config', str(config_path), 'status', '--color', 'black'])
        assert result.exit_code == 0
        assert "黑方" in result.output
