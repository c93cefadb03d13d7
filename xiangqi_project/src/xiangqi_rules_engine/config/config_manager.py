"""
配置管理器

负责加载、保存和管理规则引擎的各种配置。
"""

import logging
from dataclasses import asdict, fields, replace
from pathlib import Path
from typing import Any, Dict, Type, TypeVar

import yaml

from .rules_config import (
    RulesConfig, GameConfig, SystemConfig,
    DEFAULT_RULES_CONFIG, DEFAULT_GAME_CONFIG, DEFAULT_SYSTEM_CONFIG
)
from ..utils.exceptions import ConfigurationError

T = TypeVar('T')

logger = logging.getLogger(__name__)

VALID_LOG_LEVELS = ('DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL')
VALID_STALEMATE_OUTCOMES = ('loss', 'draw')


class ConfigManager:
    """
    配置管理器

    每类配置对应配置目录下的一个YAML文件。
    """

    def __init__(self, config_dir: str = "xiangqi_project/configs", initialize: bool = True):
        """
        初始化配置管理器

        Args:
            config_dir: 配置文件目录
            initialize: 是否为缺失的配置写入默认配置文件
        """
        self.config_dir = Path(config_dir)

        # 配置文件路径
        self.config_files = {
            'rules': self.config_dir / 'rules_config.yaml',
            'game': self.config_dir / 'game_config.yaml',
            'system': self.config_dir / 'system_config.yaml'
        }

        # 默认配置
        self.default_configs = {
            'rules': DEFAULT_RULES_CONFIG,
            'game': DEFAULT_GAME_CONFIG,
            'system': DEFAULT_SYSTEM_CONFIG
        }

        # 配置类型映射
        self.config_types = {
            'rules': RulesConfig,
            'game': GameConfig,
            'system': SystemConfig
        }

        if initialize:
            self.config_dir.mkdir(parents=True, exist_ok=True)
            self._initialize_default_configs()

    def _initialize_default_configs(self):
        """初始化默认配置文件"""
        for config_name, config_obj in self.default_configs.items():
            config_file = self.config_files[config_name]
            if not config_file.exists():
                self.save_config(config_name, config_obj)
                logger.info(f"创建默认配置文件: {config_file}")

    def _default(self, config_name: str):
        """默认配置的副本，避免修改模块级默认实例"""
        if config_name not in self.default_configs:
            raise ConfigurationError(config_name, "未知的配置名称")
        return replace(self.default_configs[config_name])

    def load_config(self, config_name: str, config_class: Type[T]) -> T:
        """
        加载配置

        文件不存在或无法解析时使用默认配置。

        Args:
            config_name: 配置名称
            config_class: 配置类

        Returns:
            配置对象
        """
        config_file = self.config_files.get(config_name)
        if not config_file or not config_file.exists():
            logger.warning(f"配置文件不存在: {config_file}，使用默认配置")
            return self._default(config_name)

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
            config = self._dict_to_dataclass(data, config_class)
            logger.info(f"成功加载配置: {config_file}")
            return config

        except (OSError, yaml.YAMLError, TypeError, AttributeError) as e:
            logger.error(f"加载配置文件失败: {config_file}, 错误: {e}")
            return self._default(config_name)

    def save_config(self, config_name: str, config_obj: Any):
        """
        保存配置

        Args:
            config_name: 配置名称
            config_obj: 配置对象
        """
        config_file = self.config_files.get(config_name)
        if not config_file:
            raise ConfigurationError(config_name, "未知的配置名称")

        data = asdict(config_obj)
        with open(config_file, 'w', encoding='utf-8') as f:
            yaml.dump(data, f, default_flow_style=False, allow_unicode=True, indent=2)

        logger.info(f"成功保存配置: {config_file}")

    def get_rules_config(self) -> RulesConfig:
        """获取规则配置"""
        return self.load_config('rules', RulesConfig)

    def get_game_config(self) -> GameConfig:
        """获取对局配置"""
        return self.load_config('game', GameConfig)

    def get_system_config(self) -> SystemConfig:
        """获取系统配置"""
        return self.load_config('system', SystemConfig)

    def update_config(self, config_name: str, **kwargs):
        """
        更新配置

        Args:
            config_name: 配置名称
            **kwargs: 要更新的配置项
        """
        if config_name not in self.config_types:
            raise ConfigurationError(config_name, "未知的配置名称")

        config = self.load_config(config_name, self.config_types[config_name])
        for key, value in kwargs.items():
            if hasattr(config, key):
                setattr(config, key, value)
            else:
                logger.warning(f"配置项不存在: {key}")

        self.save_config(config_name, config)

    def reset_config(self, config_name: str):
        """
        重置配置为默认值

        Args:
            config_name: 配置名称
        """
        self.save_config(config_name, self._default(config_name))
        logger.info(f"配置已重置为默认值: {config_name}")

    def validate_config(self, config_name: str) -> bool:
        """
        验证配置的有效性

        Args:
            config_name: 配置名称

        Returns:
            bool: 配置是否有效
        """
        if config_name not in self.config_types:
            return False

        config = self.load_config(config_name, self.config_types[config_name])
        if config_name == 'rules':
            return (config.stalemate_outcome in VALID_STALEMATE_OUTCOMES and
                    config.enforce_facing_generals is True)
        elif config_name == 'game':
            return (isinstance(config.max_moves, int) and
                    config.max_moves >= 0 and
                    isinstance(config.allow_undo, bool))
        elif config_name == 'system':
            return (str(config.log_level).upper() in VALID_LOG_LEVELS and
                    config.log_max_size > 0 and
                    config.log_backup_count >= 0)

        return True

    def get_all_configs(self) -> Dict[str, Any]:
        """
        获取所有配置

        Returns:
            Dict[str, Any]: 所有配置的字典
        """
        return {
            config_name: self.load_config(config_name, config_class)
            for config_name, config_class in self.config_types.items()
        }

    def load_from_file(self, config_path: str) -> Dict[str, Any]:
        """
        从单个YAML文件加载全部配置

        文件按配置名称分节（rules、game、system），缺少的节使用默认配置。

        Args:
            config_path: 配置文件路径

        Returns:
            Dict[str, Any]: 配置名称到配置对象的字典

        Raises:
            ConfigurationError: 文件不存在或格式错误
        """
        path = Path(config_path)
        if not path.exists():
            raise ConfigurationError(str(path), "配置文件不存在")

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigurationError(str(path), f"YAML格式错误: {e}") from e

        if not isinstance(data, dict):
            raise ConfigurationError(str(path), "顶层必须是字典")

        configs = {}
        for config_name, config_class in self.config_types.items():
            section = data.get(config_name)
            if section is None:
                configs[config_name] = self._default(config_name)
            elif isinstance(section, dict):
                configs[config_name] = self._dict_to_dataclass(section, config_class)
            else:
                raise ConfigurationError(f"{path}:{config_name}", "配置节必须是字典")

        logger.info(f"成功加载配置: {path}")
        return configs

    def export_configs(self, export_path: str):
        """
        导出所有配置到单个YAML文件

        Args:
            export_path: 导出文件路径
        """
        export_data = {
            config_name: asdict(config_obj)
            for config_name, config_obj in self.get_all_configs().items()
        }

        with open(Path(export_path), 'w', encoding='utf-8') as f:
            yaml.dump(export_data, f, default_flow_style=False, allow_unicode=True, indent=2)

        logger.info(f"配置已导出到: {export_path}")

    def _dict_to_dataclass(self, data: Dict[str, Any], dataclass_type: Type[T]) -> T:
        """
        将字典转换为数据类对象

        Args:
            data: 字典数据
            dataclass_type: 数据类类型

        Returns:
            数据类对象
        """
        field_names = {f.name for f in fields(dataclass_type)}
        filtered_data = {k: v for k, v in data.items() if k in field_names}
        return dataclass_type(**filtered_data)
