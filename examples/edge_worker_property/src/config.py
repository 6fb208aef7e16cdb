EDGE_WORKER_ID = '12345'


def on_config(config):
    """
    A property that runs the EdgeWorker in this directory on every request under /api/.
    `akj activate` uploads main.js and bundle.json as a new EdgeWorker version after the property.
    """
    config.set_caching(behavior='NO_STORE')
    config.set_origin(originType='CUSTOMER', hostname='origin.example.com')
    config.set_cp_code(value={'id': 1234})

    config.on_path(values=['/api/*']).set_edge_worker(edgeWorkerId=EDGE_WORKER_ID)
