# plugins.py
import importlib, pkgutil

def register_plugins(app, base_pkg="blueprints.games"):
    """
    自动发现 base_pkg.*.plugin，调用 get_meta()/get_blueprint() 注册到
    meta["url_prefix"]（未声明时为 /g/<slug>）
    """
    try:
        pkg = importlib.import_module(base_pkg)
    except ModuleNotFoundError:
        print(f"[plugins] base_pkg '{base_pkg}' not found")
        return

    for m in pkgutil.iter_modules(pkg.__path__):
        if not m.ispkg:
            continue
        mod_name = f"{base_pkg}.{m.name}.plugin"
        try:
            mod = importlib.import_module(mod_name)
        except ModuleNotFoundError as e:
            # 只跳过“子目录没有 plugin.py”，插件内部的导入错误照常抛出
            if e.name != mod_name:
                raise
            continue

        get_meta = getattr(mod, "get_meta", None)
        get_bp   = getattr(mod, "get_blueprint", None)
        if not callable(get_meta) or not callable(get_bp):
            print(f"[plugins] {mod_name} missing get_meta/get_blueprint, skipped")
            continue

        meta = get_meta()
        bp   = get_bp()
        slug = meta.get("slug", m.name)
        prefix = meta.get("url_prefix", f"/g/{slug}")

        app.register_blueprint(bp, url_prefix=prefix)
        print(f"[plugins] Registered '{slug}' at {prefix}/")
