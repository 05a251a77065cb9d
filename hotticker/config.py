"""Paths, constants, and the config.json snapshot the ticker reads each cycle."""

import json
import os
from dataclasses import dataclass, field
from pathlib import Path

# ─────────────────────────────────────────────────────
# App home directory: all data lives here
# ─────────────────────────────────────────────────────
APP_DIR = Path(os.environ.get("DESKTOP_NEWS_HOME", Path.home() / ".desktop-news"))
LOGS_DIR = APP_DIR / "logs"
CONFIG_FILE = APP_DIR / "config.json"

# ─────────────────────────────────────────────────────
# Network + display constants
# ─────────────────────────────────────────────────────
USER_AGENT = "Mozilla/5.0 (Windows NT 10.0; Win64; x64)"
REQUEST_TIMEOUT = 15  # seconds, per adapter call
SEPARATOR = "    "
DEFAULT_REFRESH_MINUTES = 10
DEFAULT_SHOW_COUNT = 20

NO_DATA_MESSAGE = "没有启用的数据源或所有数据源加载失败。请检查配置。"
LOAD_FAILED_MESSAGE = "数据加载失败，请检查网络连接。"
REFRESH_FAILED_MESSAGE = "数据刷新失败，请检查网络或配置。"

DEFAULT_BLACKLIST = [
    "明星", "广告", "推广", "杨紫", "王一博", "肖战", "赵丽颖", "迪丽热巴", "杨幂", "虞书欣",
    "赵露思", "白鹿", "檀健次", "成毅", "邓为", "张颂文", "王鹤棣", "魏大勋", "刘亦菲", "刘诗诗",
    "唐嫣", "张若昀", "周深", "贾玲", "沈腾", "马丽", "黄晓明", "胡歌", "雷佳音", "刘宇宁",
    "白敬亭", "吴磊", "张晚意", "曾舜晞", "田曦薇", "张婧仪", "周也", "王星越", "陈哲远", "张凌赫",
    "于适", "丞磊", "卢昱晓", "林一", "李一桐", "金晨", "秦岚", "辛芷蕾", "景甜", "高叶",
    "宋轶", "古力娜扎", "刘涛", "童瑶", "王传君", "井柏然", "黄景瑜", "彭昱畅", "李现", "朱一龙",
    "易烊千玺", "王俊凯", "王源", "鹿晗", "华晨宇", "毛不易", "汪苏泷", "张杰", "薛之谦", "李荣浩",
    "许嵩", "蔡徐坤", "范丞丞", "黄子韬", "张艺兴", "陈伟霆", "李易峰", "任嘉伦", "罗云熙", "宋茜",
    "江疏影", "关晓彤", "谭松韵", "杨超越", "鞠婧祎", "李沁", "张予曦", "陈都灵", "李兰迪", "周依然",
    "张宥浩", "王阳", "万茜", "黄轩", "欧豪", "窦骁", "韩东君", "魏晨", "陈楚生", "苏醒",
    "王铮亮", "张远", "陆虎", "王栎鑫", "郭麒麟", "大张伟", "papi酱", "傅首尔", "池子", "李诞",
    "蔡康永", "杨笠", "庞博", "呼兰", "王建国", "李雪琴", "周奇墨", "张绍刚", "王自健", "李宇春",
    "韩红", "毛阿敏", "那英", "张靓颖", "邓紫棋", "王菲", "张惠妹", "林忆莲", "范玮琪", "Angelababy",
    "杨颖", "张天爱", "蔡依林", "周杰伦", "林俊杰", "五月天", "陈奕迅", "王力宏", "李克勤", "张学友",
    "刘德华", "孙颖莎", "丁宁", "马龙", "樊振东", "许昕", "刘诗雯", "朱雨玲", "陈梦", "王曼昱",
    "张本智和", "伊藤美诚", "石川佳纯", "哪吒", "大圣归来", "白蛇：缘起", "姜子牙", "熊出没",
    "喜羊羊与灰太狼", "小猪佩奇", "哆啦A梦", "海贼王", "火影忍者", "名侦探柯南", "雷军", "小米",
]

DEFAULT_CONFIG = {
    "refresh_interval_minutes": DEFAULT_REFRESH_MINUTES,
    "sources": [
        {
            "name": "微博热搜",
            "url": "https://weibo.com/ajax/side/hotSearch",
            "color": "#FF0000",
            "category": "社交",
            "enabled": True,
            "show_count": 1,
        },
        {
            "name": "贴吧热议",
            "url": "https://tieba.baidu.com/hottopic/browse/topicList",
            "color": "#1E90FF",
            "category": "社区",
            "enabled": True,
            "show_count": 1,
        },
        {
            "name": "腾讯新闻",
            "url": "https://r.inews.qq.com/gw/event/hot_ranking_list?page_size=50",
            "color": "#32CD32",
            "category": "新闻",
            "enabled": True,
            "show_count": 1,
        },
        {
            "name": "新浪国内",
            "url": "https://top.news.sina.com.cn/ws/GetTopDataList.php?top_cat=news_china_suda",
            "color": "#FF8C00",
            "category": "新闻",
            "enabled": False,
            "show_count": 1,
        },
        {
            "name": "新浪国际",
            "url": "https://top.news.sina.com.cn/ws/GetTopDataList.php?top_cat=news_world_suda",
            "color": "#FF6347",
            "category": "新闻",
            "enabled": False,
            "show_count": 1,
        },
        {
            "name": "今日头条",
            "url": "https://www.toutiao.com/hot-event/hot-board/?origin=toutiao_pc",
            "color": "#FF4500",
            "category": "资讯",
            "enabled": True,
            "show_count": 1,
        },
    ],
    "keyword_blacklist": DEFAULT_BLACKLIST,
}


# ─────────────────────────────────────────────────────
# Config snapshot types
# ─────────────────────────────────────────────────────
def _as_int(value, default: int) -> int:
    if isinstance(value, bool):
        return default
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return default


def _as_str(value, default: str) -> str:
    return value if isinstance(value, str) else default


def _as_bool(value, default: bool) -> bool:
    return value if isinstance(value, bool) else default


def _as_list(value) -> list:
    return value if isinstance(value, list) else []


@dataclass(frozen=True)
class SourceConfig:
    """One configured feed. color/category are display metadata only."""
    name: str
    url: str = ""
    enabled: bool = True
    show_count: int = DEFAULT_SHOW_COUNT
    color: str = "#FFFFFF"
    category: str = "综合"

    def __post_init__(self):
        if self.show_count < 0:
            object.__setattr__(self, "show_count", 0)

    @classmethod
    def from_dict(cls, data: dict) -> "SourceConfig":
        return cls(
            name=_as_str(data.get("name"), ""),
            url=_as_str(data.get("url"), ""),
            enabled=_as_bool(data.get("enabled"), True),
            show_count=_as_int(data.get("show_count"), DEFAULT_SHOW_COUNT),
            color=_as_str(data.get("color"), "#FFFFFF"),
            category=_as_str(data.get("category"), "综合"),
        )

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "url": self.url,
            "color": self.color,
            "category": self.category,
            "enabled": self.enabled,
            "show_count": self.show_count,
        }


@dataclass(frozen=True)
class PipelineConfig:
    """Ordered sources, refresh interval and keyword blacklist for one cycle."""
    sources: tuple = ()
    refresh_interval_minutes: int = DEFAULT_REFRESH_MINUTES
    keyword_blacklist: tuple = field(default_factory=tuple)

    def __post_init__(self):
        if self.refresh_interval_minutes <= 0:
            object.__setattr__(self, "refresh_interval_minutes", DEFAULT_REFRESH_MINUTES)

    @property
    def enabled_sources(self) -> list[SourceConfig]:
        return [s for s in self.sources if s.enabled]

    @classmethod
    def from_dict(cls, data: dict) -> "PipelineConfig":
        sources = tuple(
            SourceConfig.from_dict(s)
            for s in _as_list(data.get("sources"))
            if isinstance(s, dict)
        )
        blacklist = tuple(
            w for w in _as_list(data.get("keyword_blacklist")) if isinstance(w, str)
        )
        return cls(
            sources=sources,
            refresh_interval_minutes=_as_int(
                data.get("refresh_interval_minutes"), DEFAULT_REFRESH_MINUTES
            ),
            keyword_blacklist=blacklist,
        )

    def to_dict(self) -> dict:
        return {
            "refresh_interval_minutes": self.refresh_interval_minutes,
            "sources": [s.to_dict() for s in self.sources],
            "keyword_blacklist": list(self.keyword_blacklist),
        }


def default_config() -> PipelineConfig:
    return PipelineConfig.from_dict(DEFAULT_CONFIG)


# ─────────────────────────────────────────────────────
# config.json load / save
# ─────────────────────────────────────────────────────
def load_config() -> PipelineConfig:
    """Load config.json, writing the defaults on first run.

    An unreadable or malformed file falls back to the defaults without
    overwriting it.
    """
    if not CONFIG_FILE.exists():
        config = default_config()
        try:
            save_config(config)
        except OSError:
            pass
        return config
    try:
        data = json.loads(CONFIG_FILE.read_text(encoding="utf-8"))
    except Exception:
        return default_config()
    if not isinstance(data, dict):
        return default_config()
    return PipelineConfig.from_dict(data)


def save_config(config: PipelineConfig):
    """Write config.json (pretty-printed, UTF-8, CJK kept readable)."""
    APP_DIR.mkdir(parents=True, exist_ok=True)
    CONFIG_FILE.write_text(
        json.dumps(config.to_dict(), indent=2, ensure_ascii=False),
        encoding="utf-8",
    )
