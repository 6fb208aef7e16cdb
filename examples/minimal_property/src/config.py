def on_config(config):
    """
    The bare minimum needed for a property: caching, a CP code and an origin.
    """
    config.set_caching(ttl='7d')
    config.set_origin(originType='CUSTOMER', hostname='example.com')
    config.set_cp_code(value={'id': 1234})

    config.on_path(values=['/images/*']).set_caching(ttl='30d')
