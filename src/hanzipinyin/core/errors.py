"""
資料來源錯誤

轉換本身不會失敗（查無資料一律原樣輸出），會失敗的只有啟動時的資料載入。
"""


class PinyinDataError(Exception):
    """拼音資料載入失敗的基底例外"""


class DataSourceNotFoundError(PinyinDataError, FileNotFoundError):
    """找不到資料來源（檔案不存在或 pypinyin 未安裝）"""


class DataSourceFormatError(PinyinDataError, ValueError):
    """資料來源內容格式錯誤"""
