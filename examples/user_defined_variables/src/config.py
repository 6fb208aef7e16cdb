def on_config(config):
    """
    Sets a PM variable at different metadata stages and forwards it in a response header.
    """
    config.set_origin(originType='CUSTOMER', hostname='example.com') \
        .set_caching(ttl='7d') \
        .set_cp_code(value={'id': 1234})

    config.set_set_variable(variableName='PMUSER_STAGE', variableValue='client-request')

    config.on_metadata_stage(value='forward-start') \
        .set_set_variable(variableName='PMUSER_STAGE', variableValue='forward-start')

    config.on_metadata_stage(value='client-response') \
        .set_set_variable(variableName='PMUSER_STAGE', variableValue='client-response')

    config.set_modify_outgoing_response_header(
        action='ADD',
        standardAddHeaderName='OTHER',
        customHeaderName='X-Stage',
        headerValue='{{user.PMUSER_STAGE}}',
    )

    config.any(lambda c: c.on_hostname(values=['www.example.com']).on_path(values=['/admin/*'])) \
        .name('Admin') \
        .set_deny_access(reason='admin')
