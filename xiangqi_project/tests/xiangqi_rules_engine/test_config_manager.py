"""
测试配置管理器
"""

from pathlib import Path

import pytest
import yaml
from xiangqi_project.src.xiangqi_rules_engine.config import (
    ConfigManager, RulesConfig, GameConfig, SystemConfig, DEFAULT_GAME_CONFIG
)
from xiangqi_project.src.xiangqi_rules_engine.utils.exceptions import ConfigurationError

DEFAULT_CONFIG_PATH = Path(__file__).parent.parent.parent / "configs" / "default.yaml"


class TestConfigManager:
    """ConfigManager类的测试"""

    @pytest.fixture
    def manager(self, tmp_path):
        return ConfigManager(str(tmp_path / "configs"))

    def test_default_files_created(self, manager):
        """测试初始化时创建默认配置文件"""
        for config_file in manager.config_files.values():
            assert config_file.exists()

    def test_load_defaults(self, manager):
        """测试加载默认配置"""
        assert manager.get_rules_config() == RulesConfig()
        assert manager.get_game_config() == GameConfig()
        assert manager.get_system_config() == SystemConfig()

    def test_update_config(self, manager):
        """测试更新配置并持久化"""
        manager.update_config('game', max_moves=120, unknown_key=1)

        reloaded = ConfigManager(str(manager.config_dir))
        assert reloaded.get_game_config().max_moves == 120
        assert not hasattr(reloaded.get_game_config(), 'unknown_key')

        # 模块级默认实例不受影响
        assert DEFAULT_GAME_CONFIG.max_moves == 300

    def test_reset_config(self, manager):
        """测试重置配置"""
        manager.update_config('rules', stalemate_outcome='draw')
        assert manager.get_rules_config().stalemate_outcome == 'draw'

        manager.reset_config('rules')
        assert manager.get_rules_config().stalemate_outcome == 'loss'

    def test_validate_config(self, manager):
        """测试配置验证"""
        assert manager.validate_config('rules')
        assert manager.validate_config('game')
        assert manager.validate_config('system')
        assert not manager.validate_config('unknown')

        manager.update_config('rules', stalemate_outcome='win')
        assert not manager.validate_config('rules')

        manager.update_config('game', max_moves=-1)
        assert not manager.validate_config('game')

        manager.update_config('system', log_level='LOUD')
        assert not manager.validate_config('system')

    def test_unknown_config_name(self, manager):
        """测试未知配置名称"""
        with pytest.raises(ConfigurationError):
            manager.update_config('unknown', value=1)

        with pytest.raises(ConfigurationError):
            manager.reset_config('unknown')

    def test_corrupted_file_falls_back_to_default(self, manager):
        """测试配置文件损坏时使用默认配置"""
        manager.config_files['game'].write_text("max_moves: [unclosed", encoding='utf-8')
        assert manager.get_game_config() == GameConfig()

    def test_unknown_keys_filtered(self, manager):
        """测试过滤未知配置项"""
        with open(manager.config_files['rules'], 'w', encoding='utf-8') as f:
            yaml.dump({'stalemate_outcome': 'draw', 'legacy_option': True}, f)

        assert manager.get_rules_config() == RulesConfig(stalemate_outcome='draw')

    def test_load_from_file(self, manager):
        """测试从默认配置文件加载全部配置"""
        configs = manager.load_from_file(str(DEFAULT_CONFIG_PATH))

        assert configs['rules'] == RulesConfig()
        assert configs['game'].max_moves == 300
        assert configs['system'].log_level == 'INFO'

    def test_load_from_file_partial(self, manager, tmp_path):
        """测试缺少的配置节使用默认配置"""
        path = tmp_path / "partial.yaml"
        path.write_text("rules:\n  stalemate_outcome: draw\n", encoding='utf-8')

        configs = manager.load_from_file(str(path))
        assert configs['rules'].stalemate_outcome == 'draw'
        assert configs['game'] == GameConfig()

    def test_load_from_file_errors(self, manager, tmp_path):
        """测试配置文件不存在或格式错误"""
        with pytest.raises(ConfigurationError):
            manager.load_from_file(str(tmp_path / "missing.yaml"))

        path = tmp_path / "bad.yaml"
        path.write_text("rules: draw\n", encoding='utf-8')
        with pytest.raises(ConfigurationError):
            manager.load_from_file(str(path))

    def test_export_configs(self, manager, tmp_path):
        """测试导出所有配置"""
        export_path = tmp_path / "export.yaml"
        manager.export_configs(str(export_path))

        with open(export_path, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f)
        assert set(data) == {'rules', 'game', 'system'}

    def test_no_files_written_without_initialize(self, tmp_path):
        """测试不初始化时不写入默认配置"""
        manager = ConfigManager(str(tmp_path / "readonly"), initialize=False)
        assert not manager.config_dir.exists()
        assert manager.get_rules_config() == RulesConfig()
