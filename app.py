from flask import Flask, make_response
from werkzeug.exceptions import BadRequest, MethodNotAllowed

from config import Config
from plugins import register_plugins

# ---------------- 错误响应 ----------------
def _plain_error(e, text):
    resp = make_response(f"{text}\n", e.code)
    resp.mimetype = "text/plain"
    return resp

def method_not_allowed(e):
    resp = _plain_error(e, "方法不允许")
    if e.valid_methods:
        resp.headers["Allow"] = ", ".join(e.valid_methods)
    return resp

def bad_request(e):
    return _plain_error(e, e.description)

# ---------------- 应用工厂 ----------------
def create_app(config_class=Config):
    config_class.validate()

    app = Flask(__name__)
    app.config.from_object(config_class)

    register_plugins(app)

    app.register_error_handler(MethodNotAllowed, method_not_allowed)
    app.register_error_handler(BadRequest, bad_request)
    return app

app = create_app()

def main():
    port = Config.port()
    print(f"服务器启动，监听端口 {port}...")
    print(f"请访问 http://localhost:{port} 开始游戏")
    # 端口被占用等启动错误直接退出，不重试
    app.run(host=Config.HOST, port=port, debug=Config.DEBUG)

if __name__ == "__main__":
    main()
