# blueprints/games/guess_number/pages.py
"""
页面渲染：固定的页面外壳 + 可变的内容片段（猜测表单 / 结果提示）
片段和外壳都是蓝图自带的 Jinja 模板
"""
from flask import render_template
from config import Config

TEMPLATE_DIR = "games/guess_number"

# 结果框的三种样式
CSS_CLASSES = ("success", "error", "info")


def render_page(fragment: str) -> str:
    """把片段原样嵌进页面外壳，返回完整 HTML 文档"""
    return render_template(f"{TEMPLATE_DIR}/shell.html", body=fragment)


def home_fragment() -> str:
    return render_template(
        f"{TEMPLATE_DIR}/home.html",
        low=Config.SECRET_MIN,
        high=Config.SECRET_MAX,
    )


def result_fragment(css_class: str, message: str) -> str:
    # message 会被转义；css_class 只接受固定的几种
    if css_class not in CSS_CLASSES:
        raise ValueError(f"unknown message class: {css_class!r}")
    return render_template(
        f"{TEMPLATE_DIR}/result.html",
        css_class=css_class,
        message=message,
    )
