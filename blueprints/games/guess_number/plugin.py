import re

from flask import Blueprint, request, redirect, url_for, make_response
from werkzeug.exceptions import BadRequest, RequestEntityTooLarge

from config import Config
from core.runtime import GameRuntime, parse_int
from .pages import render_page, home_fragment, result_fragment

SLUG = "guess_number"

# 百分号后面不是两位十六进制即为坏转义
_BAD_ESCAPE = re.compile(rb"%(?![0-9A-Fa-f]{2})")

def get_meta():
    return {
        "slug": SLUG,
        "url_prefix": "",  # 直接挂在根路径：/ 和 /guess
    }

bp = Blueprint(
    SLUG, __name__,
    template_folder="templates",
)

def _set_target(resp, secret):
    # 明文 Cookie，不签名；客户端可见可改
    resp.set_cookie(
        Config.TARGET_COOKIE, str(secret),
        max_age=Config.TARGET_COOKIE_MAX_AGE, path="/", httponly=True,
    )
    return resp

def _read_form():
    # 超过 MAX_CONTENT_LENGTH 或转义不合法都算无法解析
    try:
        body = b""
        if request.mimetype == "application/x-www-form-urlencoded":
            body = request.get_data(cache=True)
        form = request.form
    except (RequestEntityTooLarge, ValueError) as e:
        raise BadRequest("无法解析表单数据") from e
    if _BAD_ESCAPE.search(request.query_string) or _BAD_ESCAPE.search(body):
        raise BadRequest("无法解析表单数据")
    return form

def _restart(reason):
    print(f"[{SLUG}] {reason}, redirect to home")
    return redirect(url_for(".home"))

# —— 开局：每次访问首页都重新出题，覆盖旧的 Cookie ——
@bp.get("/")
def home():
    secret = GameRuntime.draw_secret()
    resp = make_response(render_page(home_fragment()))
    return _set_target(resp, secret)

# —— 猜测：只接受 POST，OPTIONS 在内的其他方法都由路由返回 405 ——
@bp.route("/guess", methods=["POST"], provide_automatic_options=False)
def guess():
    form = _read_form()

    # 表单体优先，没有时再看查询串
    raw = form.get("number")
    if raw is None:
        raw = request.args.get("number")
    n = parse_int(raw)
    if n is None:
        raise BadRequest("请输入有效的数字")

    cookie = request.cookies.get(Config.TARGET_COOKIE)
    if cookie is None:
        return _restart("no target cookie")
    secret = parse_int(cookie)
    if secret is None:
        return _restart("bad target cookie")

    verdict = GameRuntime.judge(n, secret)
    return render_page(result_fragment(verdict.css_class, verdict.message))

def get_blueprint():
    return bp
