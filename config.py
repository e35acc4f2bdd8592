"""
配置管理模块
所有配置从环境变量读取，未设置时使用默认值
"""
import os


class Config:
    """应用配置类"""

    # ===== 服务监听 =====
    # PORT 保持字符串读取，validate() 里再校验，方便报出清晰的错误
    PORT = os.environ.get("PORT") or "8080"
    HOST = os.environ.get("HOST", "0.0.0.0")

    # ===== 游戏参数 =====
    SECRET_MIN = 1
    SECRET_MAX = 100

    # 目标数字 Cookie（明文，不签名）
    TARGET_COOKIE = "target"
    TARGET_COOKIE_MAX_AGE = 3600  # 秒

    # 请求体上限，超出视为无法解析
    MAX_CONTENT_LENGTH = 10 * 1024 * 1024

    # Flask 配置
    DEBUG = os.environ.get("FLASK_DEBUG", "0").lower() in ("1", "true", "yes")

    @classmethod
    def port(cls):
        return int(str(cls.PORT).strip())

    @classmethod
    def validate(cls):
        """验证必要配置"""
        errors = []

        try:
            port = int(str(cls.PORT).strip())
            if not (0 < port < 65536):
                errors.append(f"PORT out of range: {cls.PORT}")
        except ValueError:
            errors.append(f"PORT is not a number: {cls.PORT!r}")

        if cls.SECRET_MIN > cls.SECRET_MAX:
            errors.append(
                f"Empty secret range: {cls.SECRET_MIN}..{cls.SECRET_MAX}"
            )

        if not cls.TARGET_COOKIE:
            errors.append("Missing required config: TARGET_COOKIE")

        if errors:
            raise ValueError("\n".join(errors))

        return True
