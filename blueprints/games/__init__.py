# 每个游戏一个子包，约定在 <game>/plugin.py 里提供 get_meta()/get_blueprint()
# 由 plugins.register_plugins() 自动发现并注册
