"""
全域配置模組

提供統一的配置類別，控制日誌、計時、事件回呼與資料來源。

使用方式:
    from hanzipinyin import PinyinConverter

    # 簡單開啟 verbose 模式
    converter = PinyinConverter(verbose=True)

    # 進階: 以配置物件建立（例如從自備 JSON 目錄載入資料）
    from hanzipinyin.config import ConverterConfig
    converter = PinyinConverter.from_config(ConverterConfig(data_dir="./pinyin-data"))

    # 進階: 使用標準 logging 控制
    import logging
    logging.getLogger("hanzipinyin").setLevel(logging.DEBUG)
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Optional, Union

from .core.events import ConversionEventHandler
from .utils.logger import setup_logger


def configure_logging(verbose: bool = False) -> None:
    """
    根據 verbose 設定配置 logging

    Args:
        verbose: 是否開啟詳細日誌
    """
    if verbose:
        setup_logger(level=logging.DEBUG)
    # 否則不主動設定，讓使用者可以透過標準 logging 控制


@dataclass
class ConverterConfig:
    """
    轉換器配置類別 (進階用途)

    屬性:
        verbose: 是否開啟詳細日誌
        on_timing: 計時回呼函數 (operation: str, elapsed: float) -> None
        on_event: 轉換事件回呼 (見 hanzipinyin.core.events)
        data_dir: 自備 JSON 資料目錄；None 時使用 pypinyin 預設資料
    """

    verbose: bool = False
    on_timing: Optional[Callable[[str, float], None]] = None
    on_event: Optional[ConversionEventHandler] = None
    data_dir: Optional[Union[str, Path]] = None

    def __post_init__(self):
        configure_logging(self.verbose)
