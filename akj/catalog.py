"""
The Property Manager catalog for the rule format we generate.

Each entry lists the defaults of a criterion or behavior, in the order they are assigned, and
which options may reference PM variables. Guards mirror the catalog's visibility rules: an option
only gets its default when the options it depends on make it visible.
"""
import re

from akj.defaults import Default, all_of, apply_defaults, eq, negate, neq, one_of, order_defaults

RULE_FORMAT = 'v2024-02-12'

CRITERIA_KIND = 'CRITERIA'
BEHAVIOR_KIND = 'BEHAVIOR'


class CatalogEntry:
    def __init__(self, name, kind, defaults=(), allows_vars=(), variable=(), variable_list=()):
        self.name = name
        self.kind = kind
        self.defaults = order_defaults(name, defaults)
        self.allows_vars = list(allows_vars)
        self.variable = list(variable)
        self.variable_list = list(variable_list)

    @property
    def pm_var_handling(self):
        """
        The metadata handed to the delegate: only the non-empty option lists.
        A fresh dict is built on every access.
        """
        handling = {}
        if self.allows_vars:
            handling['allows_vars'] = list(self.allows_vars)
        if self.variable:
            handling['variable'] = list(self.variable)
        if self.variable_list:
            handling['variable_list'] = list(self.variable_list)
        return handling

    def fill_defaults(self, params):
        return apply_defaults(params, self.defaults)

    def __repr__(self):
        return f"CatalogEntry({self.kind} {self.name})"


def _criterion(name, *defaults, **pm_vars):
    return CatalogEntry(name, CRITERIA_KIND, defaults, **pm_vars)


def _behavior(name, *defaults, **pm_vars):
    return CatalogEntry(name, BEHAVIOR_KIND, defaults, **pm_vars)


def _index(*entries):
    return {entry.name: entry for entry in entries}


def snake_case(name):
    """
    allowHTTPSDowngrade -> allow_https_downgrade, mPulse -> m_pulse
    """
    name = re.sub(r'([A-Z]+)([A-Z][a-z])', r'\1_\2', name)
    name = re.sub(r'([a-z0-9])([A-Z])', r'\1_\2', name)
    return name.lower()


def method_name(kind, name):
    prefix = 'on_' if kind == CRITERIA_KIND else 'set_'
    return prefix + snake_case(name)


# Shared option groups
_NAME_VALUE_MATCH = ['IS_ONE_OF', 'IS_NOT_ONE_OF']
_HEADER_VALUE_MATCH = ['IS_ONE_OF', 'IS_NOT_ONE_OF']
_CHECK_IPS_WITH_HEADERS = ['BOTH', 'HEADERS']

_DEVICE_BOOLEAN_CHARACTERISTICS = [
    'IS_WIRELESS_DEVICE', 'IS_TABLET', 'COOKIE_SUPPORT', 'AJAX_SUPPORT_JAVASCRIPT', 'FULL_FLASH_SUPPORT',
    'ACCEPT_THIRD_PARTY_COOKIE', 'GIF_ANIMATED', 'JPG', 'PNG', 'DUAL_ORIENTATION', 'IS_MOBILE',
]
_DEVICE_STRING_CHARACTERISTICS = ['BRAND_NAME', 'MODEL_NAME', 'MARKETING_NAME', 'DEVICE_OS', 'MOBILE_BROWSER',
                                  'PREFERRED_MARKUP', 'HTML_PREFERRED_DTD', 'XHTML_PREFERRED_CHARSET',
                                  'XHTML_SUPPORT_LEVEL', 'VIEWPORT_INITIAL_SCALE']
_DEVICE_NUMERIC_CHARACTERISTICS = ['RESOLUTION_WIDTH', 'RESOLUTION_HEIGHT', 'PHYSICAL_SCREEN_HEIGHT',
                                   'PHYSICAL_SCREEN_WIDTH', 'MAX_IMAGE_WIDTH', 'MAX_IMAGE_HEIGHT',
                                   'VIEWPORT_WIDTH']
_DEVICE_VERSION_CHARACTERISTICS = ['DEVICE_OS_VERSION', 'MOBILE_BROWSER_VERSION', 'XHTMLMP_PREFERRED_MIME_TYPE']

_CACHING_HONORS_HEADERS = ['CACHE_CONTROL_AND_EXPIRES', 'CACHE_CONTROL', 'EXPIRES']
_CACHING_WITH_TTL = ['MAX_AGE', 'CACHE_CONTROL_AND_EXPIRES', 'CACHE_CONTROL', 'EXPIRES']


def _enabled(option, value):
    return Default(option, value, when=eq('enabled', True))


CRITERIA = _index(
    _criterion(
        'advancedImMatch',
        Default('matchOperator', 'IS'),
        Default('matchOn', 'ANY_IM'),
    ),
    _criterion(
        'bucket',
        Default('percentage', 0),
    ),
    _criterion(
        'cacheability',
        Default('matchOperator', 'IS'),
        Default('value', 'CACHEABLE'),
    ),
    _criterion(
        'chinaCdnRegion',
        Default('matchOperator', 'IS'),
    ),
    _criterion(
        'clientCertificate',
        Default('isCertificatePresent', True),
        Default('isCertificateValid', 'IGNORE', when=eq('isCertificatePresent', True)),
        Default('enforceMtls', False, when=eq('isCertificatePresent', True)),
    ),
    _criterion(
        'clientIp',
        Default('matchOperator', 'IS_ONE_OF'),
        Default('useHeaders', False),
    ),
    _criterion(
        'clientIpVersion',
        Default('value', 'IPV4'),
        Default('useXForwardedFor', False),
    ),
    _criterion('cloudletsOrigin'),
    _criterion(
        'contentDeliveryNetwork',
        Default('matchOperator', 'IS'),
        Default('network', 'STAGING'),
    ),
    _criterion(
        'contentType',
        Default('matchOperator', 'IS_ONE_OF'),
        Default('values', ['text/html*']),
        Default('matchWildcard', True),
        Default('matchCaseSensitive', False),
    ),
    _criterion(
        'deviceCharacteristic',
        Default('characteristic', 'IS_WIRELESS_DEVICE'),
        Default('stringMatchOperator', 'MATCHES_ONE_OF',
                when=one_of('characteristic', _DEVICE_STRING_CHARACTERISTICS)),
        Default('numericMatchOperator', 'IS',
                when=one_of('characteristic', _DEVICE_NUMERIC_CHARACTERISTICS)),
        Default('versionMatchOperator', 'IS',
                when=one_of('characteristic', _DEVICE_VERSION_CHARACTERISTICS)),
        Default('booleanValue', True,
                when=one_of('characteristic', _DEVICE_BOOLEAN_CHARACTERISTICS)),
        Default('matchCaseSensitive', False,
                when=one_of('characteristic', _DEVICE_STRING_CHARACTERISTICS)),
        Default('matchWildcard', True,
                when=one_of('characteristic', _DEVICE_STRING_CHARACTERISTICS)),
    ),
    _criterion(
        'ecmdAuthGroups',
        allows_vars=['value'],
    ),
    _criterion(
        'ecmdAuthScheme',
        Default('authScheme', 'HOSTNAME'),
    ),
    _criterion('ecmdIsAuthenticated'),
    _criterion(
        'ecmdUsername',
        Default('length', 'LENGTH_64'),
    ),
    _criterion(
        'edgeWorkersFailure',
        Default('execStatus', 'ERROR'),
    ),
    _criterion(
        'fileExtension',
        Default('matchOperator', 'IS_ONE_OF'),
        Default('matchCaseSensitive', False),
    ),
    _criterion(
        'filename',
        Default('matchOperator', 'IS_ONE_OF'),
        Default('matchCaseSensitive', True),
    ),
    _criterion(
        'hostname',
        Default('matchOperator', 'IS_ONE_OF'),
    ),
    _criterion('matchAdvanced'),
    _criterion('matchCpCode'),
    _criterion(
        'matchResponseCode',
        Default('matchOperator', 'IS_ONE_OF'),
        Default('lowerBound', 400, when=one_of('matchOperator', ['IS_BETWEEN', 'IS_NOT_BETWEEN'])),
        Default('upperBound', 599, when=one_of('matchOperator', ['IS_BETWEEN', 'IS_NOT_BETWEEN'])),
    ),
    _criterion(
        'matchVariable',
        Default('matchOperator', 'IS'),
        Default('matchWildcard', False, when=one_of('matchOperator', _NAME_VALUE_MATCH)),
        Default('matchCaseSensitive', True,
                when=one_of('matchOperator', ['IS', 'IS_NOT', 'IS_ONE_OF', 'IS_NOT_ONE_OF'])),
        allows_vars=['variableExpression', 'lowerBound', 'upperBound'],
        variable=['variableName'],
    ),
    _criterion(
        'metadataStage',
        Default('matchOperator', 'IS'),
        Default('value', 'client-request'),
    ),
    _criterion(
        'originTimeout',
        Default('matchOperator', 'ORIGIN_TIMED_OUT'),
    ),
    _criterion(
        'path',
        Default('matchOperator', 'MATCHES_ONE_OF'),
        Default('matchCaseSensitive', False),
        Default('normalize', False),
    ),
    _criterion(
        'queryStringParameter',
        Default('matchOperator', 'IS_ONE_OF'),
        Default('matchWildcardName', False),
        Default('matchCaseSensitiveName', True),
        Default('escapeValue', False, when=one_of('matchOperator', _NAME_VALUE_MATCH)),
        Default('matchWildcardValue', False, when=one_of('matchOperator', _NAME_VALUE_MATCH)),
        Default('matchCaseSensitiveValue', True, when=one_of('matchOperator', _NAME_VALUE_MATCH)),
    ),
    _criterion(
        'random',
        Default('bucket', 100),
    ),
    _criterion('recoveryConfig'),
    _criterion(
        'regularExpression',
        Default('caseSensitive', True),
        allows_vars=['matchString'],
    ),
    _criterion(
        'requestCookie',
        Default('matchOperator', 'IS'),
        Default('matchWildcardName', False),
        Default('matchCaseSensitiveName', True),
        Default('matchWildcardValue', False, when=one_of('matchOperator', ['IS', 'IS_NOT'])),
        Default('matchCaseSensitiveValue', True, when=one_of('matchOperator', ['IS', 'IS_NOT'])),
    ),
    _criterion(
        'requestHeader',
        Default('matchOperator', 'IS_ONE_OF'),
        Default('matchWildcardName', False),
        Default('matchWildcardValue', False, when=one_of('matchOperator', _HEADER_VALUE_MATCH)),
        Default('matchCaseSensitiveValue', True, when=one_of('matchOperator', _HEADER_VALUE_MATCH)),
    ),
    _criterion(
        'requestMethod',
        Default('matchOperator', 'IS'),
        Default('value', 'GET'),
    ),
    _criterion(
        'requestProtocol',
        Default('value', 'HTTP'),
    ),
    _criterion(
        'requestType',
        Default('matchOperator', 'IS'),
        Default('value', 'CLIENT_REQ'),
    ),
    _criterion(
        'responseHeader',
        Default('matchOperator', 'IS_ONE_OF'),
        Default('matchWildcardName', False),
        Default('matchWildcardValue', False, when=one_of('matchOperator', _HEADER_VALUE_MATCH)),
        Default('matchCaseSensitiveValue', True, when=one_of('matchOperator', _HEADER_VALUE_MATCH)),
    ),
    _criterion(
        'serverLocation',
        Default('locationType', 'COUNTRY'),
        Default('matchOperator', 'IS_ONE_OF'),
    ),
    _criterion(
        'time',
        Default('matchOperator', 'BEGINNING'),
        Default('repeatInterval', '1d', when=eq('matchOperator', 'REPEATING')),
        Default('repeatDuration', '1d', when=eq('matchOperator', 'REPEATING')),
        Default('applyDaylightSavingsTime', False),
    ),
    _criterion(
        'tokenAuthorization',
        Default('matchOperator', 'IS_SUCCESS'),
    ),
    _criterion(
        'userAgent',
        Default('matchOperator', 'IS_ONE_OF'),
        Default('matchWildcard', True),
        Default('matchCaseSensitive', False),
    ),
    _criterion(
        'userLocation',
        Default('field', 'COUNTRY'),
        Default('matchOperator', 'IS_ONE_OF'),
        Default('checkIps', 'BOTH'),
        Default('useOnlyFirstXForwardedForIp', False, when=one_of('checkIps', _CHECK_IPS_WITH_HEADERS)),
    ),
    _criterion(
        'userNetwork',
        Default('field', 'NETWORK'),
        Default('matchOperator', 'IS_ONE_OF'),
        Default('checkIps', 'BOTH'),
        Default('useOnlyFirstXForwardedForIp', False, when=one_of('checkIps', _CHECK_IPS_WITH_HEADERS)),
    ),
    _criterion(
        'variableError',
        Default('result', True),
        variable_list=['variableNames'],
    ),
    _criterion(
        'virtualWaitingRoomRequest',
        Default('matchOperator', 'IS'),
        Default('matchOn', 'WR_ANY_REQUEST'),
    ),
    _criterion(
        'visitorPrioritizationRequest',
        Default('matchOperator', 'IS'),
        Default('matchOn', 'WAITING_ROOM_ANY_REQUEST'),
    ),
)


BEHAVIORS = _index(
    _behavior(
        'adaptiveAcceleration',
        Default('source', 'mPulse'),
        Default('enablePush', True),
        Default('enablePreconnect', True),
        Default('preloadEnable', True),
        Default('abLogic', 'DISABLED'),
        Default('cookieName', 'AKA_ab_variant', when=eq('abLogic', 'CLOUDLETS')),
        Default('enableRo', False),
        Default('enableBrotliCompression', False),
        Default('enableForNoncacheable', False, when=eq('enableBrotliCompression', True)),
    ),
    _behavior('advanced'),
    _behavior(
        'akamaizer',
        Default('enabled', True),
    ),
    _behavior(
        'akamaizerTag',
        Default('matchHostname', 'example.com'),
        Default('replaceAll', False),
        Default('includeTagsAttribute', False),
        Default('replacementHostname', 'example.com'),
        Default('scope', 'URL_ATTRIBUTE'),
    ),
    _behavior(
        'allHttpInCacheHierarchy',
        Default('enabled', True),
    ),
    _behavior(
        'allowCloudletsOrigins',
        Default('enabled', True),
        _enabled('honorBaseDirectory', False),
        _enabled('purgeOriginQueryParameter', 'originId'),
    ),
    _behavior(
        'allowDelete',
        Default('enabled', True),
        _enabled('allowBody', False),
    ),
    _behavior(
        'allowHTTPSCacheKeySharing',
        Default('enabled', True),
    ),
    _behavior(
        'allowHTTPSDowngrade',
        Default('enabled', True),
    ),
    _behavior(
        'allowOptions',
        Default('enabled', True),
    ),
    _behavior(
        'allowPatch',
        Default('enabled', True),
    ),
    _behavior(
        'allowPost',
        Default('enabled', True),
        _enabled('allowWithoutContentLength', False),
    ),
    _behavior(
        'allowPut',
        Default('enabled', True),
    ),
    _behavior(
        'allowTransferEncoding',
        Default('enabled', True),
    ),
    _behavior(
        'altSvcHeader',
        Default('maxAge', 93600),
    ),
    _behavior(
        'apiPrioritization',
        Default('enabled', True),
        _enabled('isSharedPolicy', False),
        _enabled('throttledStatusCode', 200),
    ),
    _behavior(
        'applicationLoadBalancer',
        Default('enabled', True),
        _enabled('stickinessCookieType', 'NEVER'),
        _enabled('stickinessCookieSetHttpOnlyFlag', True),
        _enabled('allowCachePrefresh', True),
        Default('failoverStatusCodes', ['500', '501', '502', '503', '504', '505', '506', '507', '508', '509'],
                when=eq('enabled', True)),
        Default('failoverMode', 'AUTOMATIC', when=eq('enabled', True)),
        Default('failoverAttemptsThreshold', 5, when=all_of(eq('enabled', True), eq('failoverMode', 'AUTOMATIC'))),
        Default('allowCachePrefreshOnFailover', False, when=eq('enabled', True)),
    ),
    _behavior(
        'audienceSegmentation',
        Default('segmentTrackingMethod', 'IN_COOKIE_HEADER'),
        Default('segmentTrackingCookieName', 'akamai-segment',
                when=one_of('segmentTrackingMethod', ['IN_COOKIE_HEADER', 'PT_COOKIE'])),
        Default('populationCookieType', 'NEVER'),
        Default('populationRefreshCookie', 'NEVER'),
    ),
    _behavior(
        'autoDomainValidation',
        Default('autodv', 'AUTO'),
    ),
    _behavior(
        'baseDirectory',
        allows_vars=['value'],
    ),
    _behavior(
        'breakConnection',
        Default('enabled', True),
    ),
    _behavior(
        'brotli',
        Default('enabled', True),
    ),
    _behavior(
        'cacheError',
        Default('enabled', True),
        _enabled('ttl', '10s'),
        _enabled('preserveStale', True),
    ),
    _behavior(
        'cacheId',
        Default('rule', 'INCLUDE_ALL_QUERY_PARAMS'),
        Default('includeValue', True,
                when=one_of('rule', ['INCLUDE_QUERY_PARAMS', 'INCLUDE_COOKIES', 'INCLUDE_HEADERS'])),
        Default('optional', True,
                when=one_of('rule', ['INCLUDE_QUERY_PARAMS', 'INCLUDE_COOKIES', 'INCLUDE_HEADERS'])),
        variable=['variableName'],
    ),
    _behavior(
        'cacheKeyIgnoreCase',
        Default('enabled', True),
    ),
    _behavior(
        'cacheKeyQueryParams',
        Default('behavior', 'INCLUDE_ALL_PRESERVE_ORDER'),
        Default('exactMatch', True, when=one_of('behavior', ['INCLUDE', 'IGNORE'])),
    ),
    _behavior(
        'cacheKeyRewrite',
        allows_vars=['purgeKey'],
    ),
    _behavior(
        'cachePost',
        Default('enabled', True),
        _enabled('useBody', 'IGNORE'),
    ),
    _behavior(
        'cacheRedirect',
        Default('enabled', False),
    ),
    _behavior(
        'cacheTag',
        allows_vars=['tag'],
    ),
    _behavior(
        'cacheTagVisible',
        Default('behavior', 'NEVER'),
    ),
    _behavior(
        'caching',
        Default('behavior', 'MAX_AGE'),
        Default('mustRevalidate', False, when=one_of('behavior', _CACHING_WITH_TTL)),
        Default('defaultTtl', '1d', when=one_of('behavior', _CACHING_HONORS_HEADERS)),
        # Visible only on contracts with the enhanced RFC feature, which is not known here.
        Default('enhancedRfcSupport', False),
        Default('honorNoStore', True),
        Default('honorPrivate', False),
        Default('honorNoCache', True),
        Default('honorMaxAge', True),
        Default('honorSMaxage', False),
        Default('honorMustRevalidate', False),
        Default('honorProxyRevalidate', False),
    ),
    _behavior(
        'centralAuthorization',
        Default('enabled', True),
    ),
    _behavior(
        'chaseRedirects',
        Default('enabled', True),
        _enabled('limit', '4'),
        _enabled('serve404', True),
    ),
    _behavior(
        'clientCertificateAuth',
        Default('enable', True),
        Default('enableCompleteClientCertificate', False, when=eq('enable', True)),
        Default('clientCertificateAttributes', ['SUBJECT'],
                when=all_of(eq('enable', True), eq('enableCompleteClientCertificate', False))),
        Default('enableClientCertValidationStatus', False, when=eq('enable', True)),
    ),
    _behavior(
        'clientCharacteristics',
        Default('country', 'UNKNOWN'),
    ),
    _behavior(
        'cloudInterconnects',
        Default('enabled', True),
    ),
    _behavior(
        'cloudWrapper',
        Default('enabled', True),
    ),
    _behavior(
        'cloudWrapperAdvanced',
        Default('enabled', True),
    ),
    _behavior(
        'cmcd',
        Default('enabled', True),
    ),
    _behavior('conditionalOrigin'),
    _behavior(
        'constructResponse',
        Default('enabled', True),
        _enabled('responseCode', 200),
        _enabled('forceEviction', False),
        _enabled('ignorePurge', False),
        allows_vars=['body'],
    ),
    _behavior(
        'contentCharacteristics',
        Default('objectSize', 'UNKNOWN'),
        Default('popularityDistribution', 'UNKNOWN'),
        Default('catalogSize', 'UNKNOWN'),
        Default('contentType', 'UNKNOWN'),
    ),
    _behavior(
        'contentPrePosition',
        Default('enabled', True),
        _enabled('firstLocation', 'US_EAST'),
    ),
    _behavior(
        'corsSupport',
        Default('enabled', True),
        _enabled('allowOrigins', 'ANY'),
        Default('allowCredentials', False,
                when=all_of(eq('enabled', True), neq('allowOrigins', 'ANY'))),
        _enabled('allowHeaders', 'ANY'),
        _enabled('methods', ['GET', 'POST']),
        _enabled('preflightMaxAge', '86400s'),
    ),
    _behavior('cpCode'),
    _behavior('customBehavior'),
    _behavior(
        'datastream',
        Default('streamType', 'LOG'),
        Default('logEnabled', False, when=one_of('streamType', ['LOG', 'LOG_AND_BEACON'])),
        Default('samplingPercentage', 100,
                when=all_of(one_of('streamType', ['LOG', 'LOG_AND_BEACON']), eq('logEnabled', True))),
        Default('collectMidgressTraffic', False,
                when=all_of(one_of('streamType', ['LOG', 'LOG_AND_BEACON']), eq('logEnabled', True))),
        Default('beaconStreamTitle', '', when=one_of('streamType', ['BEACON', 'LOG_AND_BEACON'])),
    ),
    _behavior(
        'dcp',
        Default('enabled', True),
        _enabled('namespaceId', ''),
        _enabled('tlsenabled', True),
        _enabled('wsenabled', False),
        _enabled('gwenabled', True),
        _enabled('anonymous', False),
    ),
    _behavior(
        'dcpAuthHmacTransformation',
        Default('hashConversionAlgorithm', 'SHA256'),
    ),
    _behavior(
        'dcpAuthRegexTransformation',
        allows_vars=['regexPattern'],
    ),
    _behavior(
        'dcpAuthSubstringTransformation',
        Default('substringStart', '0'),
        Default('substringEnd', '10'),
    ),
    _behavior(
        'dcpAuthVariableExtractor',
        Default('certificateField', 'SUBJECT_DN'),
        variable=['dcpMutualAuthProcessingVariableId'],
    ),
    _behavior(
        'dcpDefaultAuthzGroups',
        allows_vars=['groupNames'],
    ),
    _behavior(
        'dcpDevRelease',
        Default('enabled', False),
    ),
    _behavior(
        'dcpRealTimeAuth',
        Default('extractNamespace', False),
        Default('extractJurisdiction', False),
        Default('extractHostname', False),
    ),
    _behavior(
        'denyAccess',
        Default('reason', 'default-deny-reason'),
        Default('enabled', True),
    ),
    _behavior('deviceCharacteristicCacheId'),
    _behavior(
        'deviceCharacteristicHeader',
        Default('elements', ['BRAND_NAME', 'MODEL_NAME', 'IS_WIRELESS_DEVICE', 'IS_TABLET', 'DEVICE_OS']),
    ),
    _behavior(
        'dnsAsyncRefresh',
        Default('enabled', True),
        _enabled('timeout', '2h'),
    ),
    _behavior(
        'dnsPrefresh',
        Default('enabled', True),
        _enabled('delay', '5m'),
        _enabled('timeout', '2h'),
    ),
    _behavior(
        'downgradeProtocol',
        Default('enabled', True),
    ),
    _behavior(
        'downstreamCache',
        Default('behavior', 'ALLOW'),
        Default('allowBehavior', 'LESSER', when=eq('behavior', 'ALLOW')),
        Default('sendHeaders', 'CACHE_CONTROL_AND_EXPIRES', when=one_of('behavior', ['ALLOW', 'MUST_REVALIDATE'])),
        Default('sendPrivate', False, when=one_of('behavior', ['ALLOW', 'MUST_REVALIDATE'])),
    ),
    _behavior(
        'dynamicThroughtputOptimization',
        Default('enabled', True),
    ),
    _behavior(
        'dynamicWebContent',
        Default('sureRoute', True),
        Default('prefetch', True),
        Default('realUserMonitoring', False),
        Default('imageCompression', False),
    ),
    _behavior(
        'earlyHints',
        Default('enabled', True),
        allows_vars=['resourceUrl'],
    ),
    _behavior(
        'edgeConnect',
        Default('enabled', True),
        _enabled('apiConnector', 'DEFAULT'),
        _enabled('apiDataElements', ['URL', 'STATUS', 'CLIENT_IP']),
        _enabled('destinationHostname', 'example.com'),
        _enabled('destinationPath', '/'),
        _enabled('overrideAggregateSettings', False),
    ),
    _behavior(
        'edgeLoadBalancingAdvanced',
        allows_vars=['xml'],
    ),
    _behavior(
        'edgeLoadBalancingDataCenter',
        Default('enableFailover', False),
        Default('ip', ''),
    ),
    _behavior(
        'edgeLoadBalancingOrigin',
        Default('enabled', True),
        _enabled('enableSessionPersistence', False),
        Default('cookieName', 'AKAMAI_SESSION',
                when=all_of(eq('enabled', True), eq('enableSessionPersistence', True))),
        allows_vars=['hostname'],
    ),
    _behavior(
        'edgeRedirector',
        Default('enabled', True),
        _enabled('isSharedPolicy', False),
    ),
    _behavior(
        'edgeScape',
        Default('enabled', True),
    ),
    _behavior(
        'edgeSideIncludes',
        Default('enabled', True),
        _enabled('enableViaHttp', False),
        _enabled('passSetCookie', False),
        _enabled('passClientIp', False),
        _enabled('i18nStatus', False),
        _enabled('detectInjection', False),
    ),
    _behavior(
        'edgeWorker',
        Default('enabled', True),
        _enabled('mPulse', False),
    ),
    _behavior('enhancedAkamaiProtocol'),
    _behavior(
        'enhancedProxyDetection',
        Default('enabled', True),
        _enabled('forwardHeaderEnrichment', False),
        _enabled('enableConfigurationMode', 'BEST_PRACTICE'),
        Default('bestPracticeAction', 'ALLOW',
                when=all_of(eq('enabled', True), eq('enableConfigurationMode', 'BEST_PRACTICE'))),
    ),
    _behavior(
        'failAction',
        Default('enabled', True),
        _enabled('actionType', 'REDIRECT'),
        Default('redirectHostnameType', 'ORIGINAL',
                when=all_of(eq('enabled', True), eq('actionType', 'REDIRECT'))),
        Default('redirectCustomPath', False,
                when=all_of(eq('enabled', True), eq('actionType', 'REDIRECT'))),
        Default('redirectMethod', 302,
                when=all_of(eq('enabled', True), eq('actionType', 'REDIRECT'))),
        Default('preserveQueryString', True,
                when=all_of(eq('enabled', True), eq('actionType', 'RECREATED_CO'))),
        Default('modifyProtocol', False,
                when=all_of(eq('enabled', True), one_of('actionType', ['RECREATED_CO', 'RECREATED_NS']))),
        Default('statusCode', 200,
                when=all_of(eq('enabled', True), eq('actionType', 'DYNAMIC'))),
        Default('cexCustomPath', False,
                when=all_of(eq('enabled', True), eq('actionType', 'RECREATED_CEX'))),
        Default('allowFCMParentOverride', False, when=eq('enabled', True)),
        allows_vars=['contentPath', 'contentCustomPath', 'redirectPath'],
    ),
    _behavior(
        'fastInvalidate',
        Default('enabled', True),
    ),
    _behavior(
        'forwardRewrite',
        Default('enabled', True),
        _enabled('isSharedPolicy', False),
    ),
    _behavior(
        'frontEndOptimization',
        Default('enabled', True),
    ),
    _behavior(
        'g2oheader',
        Default('enabled', True),
        _enabled('dataHeader', 'X-Akamai-G2O-Auth-Data'),
        _enabled('signedHeader', 'X-Akamai-G2O-Auth-Sign'),
        _enabled('encodingVersion', 5),
        _enabled('useCustomSignString', False),
    ),
    _behavior(
        'globalRequestNumber',
        Default('outputOption', 'RESPONSE_HEADER'),
        Default('headerName', 'Akamai-GRN', when=one_of('outputOption', ['RESPONSE_HEADER', 'REQUEST_HEADER',
                                                                           'BOTH_HEADERS'])),
        variable=['variableName'],
    ),
    _behavior(
        'graphqlCaching',
        Default('enabled', True),
        _enabled('cacheResponsesWithErrors', False),
        _enabled('postRequestProcessingErrorHandling', 'APPLY_CACHING_BEHAVIOR'),
        _enabled('operationsUrlQueryParameterName', 'query'),
        _enabled('operationsJsonBodyParameterName', 'query'),
    ),
    _behavior(
        'gzipResponse',
        Default('behavior', 'ORIGIN_RESPONSE'),
    ),
    _behavior(
        'healthDetection',
        Default('retryCount', 3),
        Default('retryInterval', '60s'),
        Default('maximumReconnects', 3),
    ),
    _behavior('http2'),
    _behavior(
        'http3',
        Default('enable', True),
    ),
    _behavior(
        'httpStrictTransportSecurity',
        Default('enable', True),
        Default('maxAge', 'ONE_DAY', when=eq('enable', True)),
        Default('includeSubDomains', False, when=eq('enable', True)),
        Default('preload', False, when=eq('enable', True)),
        Default('redirect', False, when=eq('enable', True)),
        Default('redirectStatusCode', 301, when=all_of(eq('enable', True), eq('redirect', True))),
    ),
    _behavior(
        'httpToHttpsUpgrade',
        Default('upgrade', True),
    ),
    _behavior(
        'imOverride',
        Default('override', 'POLICY'),
        Default('typesel', 'URL'),
        allows_vars=['formatvar', 'dprvar', 'excludeAllQueryParameters'],
        variable=['policyvar', 'policyvarName'],
    ),
    _behavior(
        'imageAndVideoManager',
        Default('imageDeliveryEnabled', True),
        Default('videoDeliveryEnabled', False),
        Default('applyBestFileType', True),
    ),
    _behavior(
        'imageManager',
        Default('enabled', True),
        _enabled('resize', False),
        _enabled('applyBestFileType', True),
        _enabled('superCacheRegion', 'US'),
        _enabled('useExistingPolicySet', False),
        _enabled('advanced', False),
    ),
    _behavior(
        'imageManagerVideo',
        Default('enabled', True),
        _enabled('resize', False),
        _enabled('applyBestFileType', True),
        _enabled('superCacheRegion', 'US'),
        _enabled('useExistingPolicySet', False),
        _enabled('advanced', False),
    ),
    _behavior(
        'include',
        allows_vars=['id'],
    ),
    _behavior(
        'instant',
        Default('prefetchCacheable', True),
        Default('prefetchNoStore', False),
        Default('prefetchHtml', True),
    ),
    _behavior(
        'largeFileOptimization',
        Default('enabled', True),
        _enabled('enablePartialObjectCaching', 'PARTIAL_OBJECT_CACHING'),
        Default('minimumSize', '100MB',
                when=all_of(eq('enabled', True), eq('enablePartialObjectCaching', 'PARTIAL_OBJECT_CACHING'))),
        Default('maximumSize', '16GB',
                when=all_of(eq('enabled', True), eq('enablePartialObjectCaching', 'PARTIAL_OBJECT_CACHING'))),
        Default('useVersioning', False,
                when=all_of(eq('enabled', True), eq('enablePartialObjectCaching', 'PARTIAL_OBJECT_CACHING'))),
    ),
    _behavior(
        'largeFileOptimizationAdvanced',
        Default('enabled', True),
        _enabled('objectSize', '10MB'),
        _enabled('fragmentSize', 'ONE_MB'),
        _enabled('prefetchDuringRequest', 2),
        _enabled('prefetchAfterRequest', 2),
    ),
    _behavior(
        'limitBitRate',
        Default('enabled', True),
    ),
    _behavior(
        'logCustom',
        Default('logCustomLogField', False),
        allows_vars=['customLogField'],
    ),
    _behavior(
        'mPulse',
        Default('enabled', True),
        _enabled('requirePci', False),
        _enabled('loaderVersion', 'V12'),
        _enabled('apiKey', ''),
        _enabled('bufferSize', ''),
        _enabled('configOverride', ''),
    ),
    _behavior(
        'manualServerPush',
        allows_vars=['serverpushlist'],
    ),
    _behavior(
        'mediaAcceleration',
        Default('enabled', True),
    ),
    _behavior(
        'metadataCaching',
        Default('enabled', True),
    ),
    _behavior(
        'modifyIncomingRequestHeader',
        Default('action', 'ADD'),
        Default('standardAddHeaderName', 'ACCEPT_ENCODING', when=eq('action', 'ADD')),
        Default('standardDeleteHeaderName', 'IF_MODIFIED_SINCE', when=eq('action', 'DELETE')),
        Default('standardModifyHeaderName', 'ACCEPT_ENCODING', when=eq('action', 'MODIFY')),
        Default('standardPassHeaderName', 'ACCEPT_ENCODING', when=eq('action', 'REGEX')),
        Default('avoidDuplicateHeaders', False, when=eq('action', 'ADD')),
        Default('matchMultiple', False, when=eq('action', 'REGEX')),
        allows_vars=['customHeaderName', 'headerValue', 'newHeaderValue', 'regexHeaderMatch',
                     'regexHeaderReplace'],
    ),
    _behavior(
        'modifyIncomingResponseHeader',
        Default('action', 'ADD'),
        Default('standardAddHeaderName', 'CACHE_CONTROL', when=eq('action', 'ADD')),
        Default('standardDeleteHeaderName', 'CACHE_CONTROL', when=eq('action', 'DELETE')),
        Default('standardModifyHeaderName', 'CACHE_CONTROL', when=eq('action', 'MODIFY')),
        Default('standardPassHeaderName', 'CACHE_CONTROL', when=eq('action', 'REGEX')),
        Default('avoidDuplicateHeaders', False, when=eq('action', 'ADD')),
        Default('matchMultiple', False, when=eq('action', 'REGEX')),
        allows_vars=['customHeaderName', 'headerValue', 'newHeaderValue', 'regexHeaderMatch',
                     'regexHeaderReplace'],
    ),
    _behavior(
        'modifyOutgoingRequestHeader',
        Default('action', 'ADD'),
        Default('standardAddHeaderName', 'USER_AGENT', when=eq('action', 'ADD')),
        Default('standardDeleteHeaderName', 'PRAGMA', when=eq('action', 'DELETE')),
        Default('standardModifyHeaderName', 'USER_AGENT', when=eq('action', 'MODIFY')),
        Default('avoidDuplicateHeaders', False, when=eq('action', 'ADD')),
        Default('matchMultiple', False, when=eq('action', 'REGEX')),
        allows_vars=['customHeaderName', 'headerValue', 'newHeaderValue', 'regexHeaderMatch',
                     'regexHeaderReplace'],
    ),
    _behavior(
        'modifyOutgoingResponseHeader',
        Default('action', 'ADD'),
        Default('standardAddHeaderName', 'CACHE_CONTROL', when=eq('action', 'ADD')),
        Default('standardDeleteHeaderName', 'CACHE_CONTROL', when=eq('action', 'DELETE')),
        Default('standardModifyHeaderName', 'CACHE_CONTROL', when=eq('action', 'MODIFY')),
        Default('avoidDuplicateHeaders', False, when=eq('action', 'ADD')),
        Default('matchMultiple', False, when=eq('action', 'REGEX')),
        allows_vars=['customHeaderName', 'headerValue', 'newHeaderValue', 'regexHeaderMatch',
                     'regexHeaderReplace'],
    ),
    _behavior(
        'modifyViaHeader',
        Default('enabled', True),
        _enabled('modificationOption', 'REMOVE_HEADER'),
    ),
    _behavior(
        'origin',
        Default('originType', 'CUSTOMER'),
        Default('forwardHostHeader', 'REQUEST_HOST_HEADER', when=eq('originType', 'CUSTOMER')),
        Default('cacheKeyHostname', 'REQUEST_HOST_HEADER', when=eq('originType', 'CUSTOMER')),
        Default('compress', True),
        Default('enableTrueClientIp', True),
        Default('trueClientIpHeader', 'True-Client-IP', when=eq('enableTrueClientIp', True)),
        Default('trueClientIpClientSetting', False, when=eq('enableTrueClientIp', True)),
        Default('verificationMode', 'PLATFORM_SETTINGS', when=eq('originType', 'CUSTOMER')),
        Default('originSni', True,
                when=all_of(eq('originType', 'CUSTOMER'), one_of('verificationMode', ['PLATFORM_SETTINGS',
                                                                                    'CUSTOM']))),
        Default('customValidCnValues', ['{{Origin Hostname}}', '{{Forward Host Header}}'],
                when=eq('verificationMode', 'CUSTOM')),
        Default('originCertsToHonor', 'STANDARD_CERTIFICATE_AUTHORITIES', when=eq('verificationMode', 'CUSTOM')),
        Default('standardCertificateAuthorities', ['akamai-permissive'],
                when=all_of(eq('verificationMode', 'CUSTOM'),
                            one_of('originCertsToHonor', ['STANDARD_CERTIFICATE_AUTHORITIES', 'COMBO']))),
        Default('httpPort', 80, when=negate(eq('originType', 'NET_STORAGE'))),
        Default('httpsPort', 443, when=negate(eq('originType', 'NET_STORAGE'))),
        Default('ipVersion', 'IPV4', when=eq('originType', 'CUSTOMER')),
        allows_vars=['hostname', 'customForwardHostHeader'],
    ),
    _behavior(
        'originCharacteristics',
        Default('authenticationMethod', 'AUTOMATIC'),
        Default('country', 'UNKNOWN'),
    ),
    _behavior(
        'originFailureRecoveryMethod',
        Default('recoveryMethod', 'RETRY_ALTERNATE_ORIGIN'),
        Default('customStatusCode', '500', when=eq('recoveryMethod', 'RESPOND_CUSTOM_STATUS')),
    ),
    _behavior(
        'originFailureRecoveryPolicy',
        Default('enabled', True),
        _enabled('tuningParameters', 'RECOMMENDED'),
        _enabled('enableIPAvoidance', True),
        _enabled('monitorOriginResponsiveness', True),
        Default('originResponsivenessTimeout', 'MEDIUM',
                when=all_of(eq('enabled', True), eq('monitorOriginResponsiveness', True))),
        Default('originResponsivenessMonitoring', 'ALWAYS',
                when=all_of(eq('enabled', True), eq('monitorOriginResponsiveness', True))),
        _enabled('monitorStatusCodes1', True),
        Default('monitorResponseCodes1', ['502', '503'],
                when=all_of(eq('enabled', True), eq('monitorStatusCodes1', True))),
        Default('monitorStatusCodes1EnableRecovery', False,
                when=all_of(eq('enabled', True), eq('monitorStatusCodes1', True))),
        _enabled('monitorStatusCodes2', False),
        _enabled('monitorStatusCodes3', False),
    ),
    _behavior(
        'originIpAcl',
        Default('enable', True),
    ),
    _behavior(
        'permissionsPolicy',
        Default('permissionsPolicyDirective', []),
        Default('allowList', ''),
    ),
    _behavior(
        'persistentClientConnection',
        Default('enabled', True),
        _enabled('timeout', '500s'),
    ),
    _behavior(
        'persistentConnection',
        Default('enabled', True),
        _enabled('timeout', '5m'),
    ),
    _behavior(
        'personallyIdentifiableInformation',
        Default('enabled', True),
    ),
    _behavior(
        'phasedRelease',
        Default('enabled', True),
        _enabled('isSharedPolicy', False),
        _enabled('populationCookieType', 'NONE'),
        _enabled('failoverEnabled', False),
    ),
    _behavior('preconnect'),
    _behavior(
        'prefetch',
        Default('enabled', True),
    ),
    _behavior(
        'prefetchable',
        Default('enabled', True),
    ),
    _behavior(
        'prefreshCache',
        Default('enabled', True),
        _enabled('prefreshval', 90),
    ),
    _behavior(
        'quicBeta',
        Default('enabled', True),
        _enabled('quicOfferPercentage', 50),
    ),
    _behavior(
        'randomSeek',
        Default('flv', False),
        Default('mp4', False),
        Default('maximumSize', '2MB', when=eq('flv', True)),
    ),
    _behavior(
        'readTimeout',
        Default('value', '120s'),
    ),
    _behavior(
        'realUserMonitoring',
        Default('enabled', True),
    ),
    _behavior(
        'redirect',
        Default('mobileDefaultChoice', 'DEFAULT'),
        Default('destinationProtocol', 'SAME_AS_REQUEST', when=eq('mobileDefaultChoice', 'DEFAULT')),
        Default('destinationHostname', 'SAME_AS_REQUEST', when=eq('mobileDefaultChoice', 'DEFAULT')),
        Default('destinationPath', 'SAME_AS_REQUEST', when=eq('mobileDefaultChoice', 'DEFAULT')),
        Default('queryString', 'APPEND', when=eq('mobileDefaultChoice', 'DEFAULT')),
        Default('responseCode', 302),
        allows_vars=['destinationHostnameOther', 'destinationPathOther', 'destinationPathPrefix',
                     'destinationPathSuffix'],
    ),
    _behavior(
        'redirectplus',
        Default('enabled', True),
        _enabled('responseCode', 302),
        allows_vars=['destination'],
    ),
    _behavior(
        'refererChecking',
        Default('enabled', True),
        _enabled('strict', False),
        _enabled('allowChildren', True),
    ),
    _behavior('removeQueryParameter'),
    _behavior(
        'removeVary',
        Default('enabled', True),
    ),
    _behavior(
        'report',
        Default('logHost', False),
        Default('logReferer', False),
        Default('logUserAgent', True),
        Default('logAcceptLanguage', False),
        Default('logCookies', 'OFF'),
        Default('logCustomLogField', False),
        Default('logEdgeIP', False),
        Default('logXForwardedFor', False),
        allows_vars=['customLogField'],
    ),
    _behavior(
        'requestClientHints',
        Default('acceptCh', []),
        Default('acceptCriticalCh', []),
        Default('reset', False),
    ),
    _behavior(
        'requestControl',
        Default('enabled', True),
        _enabled('isSharedPolicy', False),
        _enabled('enableBranded403', False),
        Default('branded403StatusCode', 403, when=all_of(eq('enabled', True), eq('enableBranded403', True))),
        Default('branded403Url', '',
                when=all_of(eq('enabled', True), neq('branded403StatusCode', 302))),
        Default('brandedDenyCacheTtl', 5,
                when=all_of(eq('enabled', True), neq('branded403StatusCode', 302))),
    ),
    _behavior(
        'requestTypeMarker',
        Default('requestType', 'EW_SUBREQUEST'),
    ),
    _behavior(
        'resourceOptimizer',
        Default('enabled', True),
    ),
    _behavior(
        'responseCode',
        Default('statusCode', 200),
        Default('override206', False, when=eq('statusCode', 200)),
    ),
    _behavior(
        'responseCookie',
        Default('enabled', True),
        _enabled('type', 'UNIQUE'),
        _enabled('defaultDomain', True),
        _enabled('defaultPath', True),
        _enabled('expires', 'ON_BROWSER_CLOSE'),
        Default('duration', '1d', when=all_of(eq('enabled', True), eq('expires', 'DURATION'))),
        _enabled('sameSite', 'DEFAULT'),
        _enabled('secure', False),
        _enabled('httpOnly', False),
        Default('format', 'AKAMAI', when=all_of(eq('enabled', True), eq('type', 'UNIQUE'))),
        allows_vars=['value'],
    ),
    _behavior(
        'restrictObjectCaching',
        Default('maximumSize', '1MB'),
    ),
    _behavior(
        'returnCacheStatus',
        Default('responseHeaderName', 'Akamai-Cache-Status'),
    ),
    _behavior(
        'rewriteUrl',
        Default('behavior', 'REPLACE'),
        Default('keepQueryString', True),
        Default('matchMultiple', False, when=eq('behavior', 'REGEX_REPLACE')),
        allows_vars=['match', 'targetPath', 'targetPathPrepend', 'targetUrl', 'targetRegex'],
    ),
    _behavior(
        'rumCustom',
        Default('rumSampleRate', 5),
        allows_vars=['rumGroupName'],
    ),
    _behavior(
        'scheduleInvalidation',
        Default('repeat', False),
        Default('refreshMethod', 'INVALIDATE'),
        Default('repeatInterval', '1d', when=eq('repeat', True)),
    ),
    _behavior(
        'scriptManagement',
        Default('enabled', True),
        _enabled('serviceworker', 'YES_SERVICE_WORKER'),
    ),
    _behavior(
        'segmentedMediaOptimization',
        Default('behavior', 'ON_DEMAND'),
        Default('enableUllStreaming', False, when=eq('behavior', 'LIVE')),
        Default('showAdvanced', False, when=eq('behavior', 'LIVE')),
    ),
    _behavior(
        'setVariable',
        Default('valueSource', 'EXPRESSION'),
        Default('extractLocation', 'CLIENT_CERTIFICATE', when=eq('valueSource', 'EXTRACT')),
        Default('certificateFieldName', 'VERSION',
                when=all_of(eq('valueSource', 'EXTRACT'), eq('extractLocation', 'CLIENT_CERTIFICATE'))),
        Default('deviceProfile', 'IS_MOBILE',
                when=all_of(eq('valueSource', 'EXTRACT'), eq('extractLocation', 'DEVICE_PROFILE'))),
        Default('locationId', 'COUNTRY_CODE',
                when=all_of(eq('valueSource', 'EXTRACT'), eq('extractLocation', 'EDGESCAPE'))),
        Default('queryParameterName', '',
                when=all_of(eq('valueSource', 'EXTRACT'), eq('extractLocation', 'QUERY_STRING'))),
        Default('generator', 'HEXRAND', when=eq('valueSource', 'GENERATE')),
        Default('numberOfBytes', 16,
                when=all_of(eq('valueSource', 'GENERATE'), eq('generator', 'HEXRAND'))),
        Default('minRandomNumber', '0',
                when=all_of(eq('valueSource', 'GENERATE'), eq('generator', 'RAND'))),
        Default('maxRandomNumber', '4294967295',
                when=all_of(eq('valueSource', 'GENERATE'), eq('generator', 'RAND'))),
        Default('transform', 'NONE', when=neq('valueSource', 'GENERATE')),
        Default('caseSensitive', True,
                when=one_of('transform', ['SUBSTITUTE', 'EXTRACT_PARAM'])),
        Default('globalSubstitution', False, when=eq('transform', 'SUBSTITUTE')),
        Default('separator', '', when=eq('transform', 'EXTRACT_PARAM')),
        allows_vars=['variableValue', 'headerName', 'responseHeaderName', 'setCookieName', 'cookieName',
                     'pathMatchCase', 'regex', 'replacement', 'extractParam', 'separator'],
        variable=['variableName'],
    ),
    _behavior(
        'simulateErrorCode',
        Default('errorType', 'ERR_DNS_TIMEOUT'),
        Default('timeout', '5s', when=one_of('errorType', ['ERR_DNS_TIMEOUT', 'ERR_CONNECT_TIMEOUT',
                                                          'ERR_READ_TIMEOUT'])),
    ),
    _behavior('siteShield'),
    _behavior(
        'standardTLSMigration',
        Default('enabled', False),
        _enabled('migrationFrom', 'SHARED_CERT'),
        _enabled('allowHTTPSUpgrade', False),
        _enabled('allowHTTPSDowngrade', False),
        _enabled('cacheSharingDuration', 86400),
        _enabled('isCertificateSNIOnly', False),
    ),
    _behavior(
        'strictHeaderParsing',
        Default('validMode', True),
        Default('strictMode', False),
    ),
    _behavior(
        'subCustomer',
        Default('enabled', True),
        _enabled('origin', False),
        _enabled('partnerDomainSuffix', ''),
        _enabled('caching', False),
        _enabled('tokenAuthorization', False),
        _enabled('siteFailover', False),
        _enabled('contentCompressor', False),
        _enabled('accessControl', False),
        _enabled('dynamicWebContent', False),
        _enabled('onDemandVideoDelivery', False),
        _enabled('largeFileDelivery', False),
        _enabled('webApplicationFirewall', False),
        _enabled('geoLocation', False),
        _enabled('refererChecking', False),
        _enabled('ipBlocking', False),
        _enabled('modifyPath', False),
        _enabled('cacheKey', False),
    ),
    _behavior(
        'sureRoute',
        Default('enabled', True),
        _enabled('type', 'PERFORMANCE'),
        _enabled('toHostStatus', 'INCOMING_HH'),
        _enabled('raceStatTtl', '30m'),
        _enabled('forceSslForward', False),
        _enabled('enableCustomKey', False),
        allows_vars=['testObjectUrl', 'toHost'],
    ),
    _behavior(
        'tcpOptimization',
        Default('display', ''),
    ),
    _behavior(
        'teaLeaf',
        Default('enabled', True),
        _enabled('limitToDynamic', True),
    ),
    _behavior(
        'tieredDistribution',
        Default('enabled', True),
        _enabled('tieredDistributionMap', 'CH2'),
    ),
    _behavior(
        'tieredDistributionAdvanced',
        Default('method', 'SERIAL_PREPEND'),
        Default('policy', 'PERCH'),
        Default('tieredDistributionMap', 'CH2'),
        Default('allowall', False),
    ),
    _behavior(
        'tieredDistributionCustomization',
        Default('customMapEnabled', False),
        Default('serialStartEnabled', False),
        Default('hashAlgorithm', 'GCC', when=eq('serialStartEnabled', True)),
        Default('cloudWrapperMapMigrationEnabled', False),
        Default('location', '', when=eq('cloudWrapperMapMigrationEnabled', True)),
    ),
    _behavior(
        'timeout',
        Default('value', '5s'),
    ),
    _behavior(
        'uidConfiguration',
        Default('enabled', True),
        _enabled('extractLocation', 'CLIENT_REQUEST_HEADER'),
        variable=['variableName'],
    ),
    _behavior(
        'validateEntityTag',
        Default('enabled', True),
    ),
    _behavior(
        'verifyJsonWebToken',
        Default('extractLocation', 'CLIENT_REQUEST_HEADER'),
        Default('enableRS256', False),
        Default('enableES256', False),
        Default('checkKeyId', False),
    ),
    _behavior(
        'verifyTokenAuthorization',
        Default('useAdvanced', False),
        Default('location', 'COOKIE'),
        Default('locationId', '__token__'),
        Default('algorithm', 'SHA256'),
        Default('escapeHmacInputs', True),
        Default('ignoreQueryString', False),
        Default('failureResponse', True),
    ),
    _behavior(
        'virtualWaitingRoom',
        Default('sessionAutoProlong', True),
        Default('sessionDuration', 300),
        Default('waitingRoomCacheId', ''),
        Default('waitingRoomPath', ''),
        Default('waitingRoomDirectory', ''),
        Default('cookieDomainType', 'DEFAULT'),
        Default('cookieDomain', '', when=eq('cookieDomainType', 'CUSTOM')),
        Default('waitingRoomStatusCode', 200),
        Default('waitingRoomUseCpCode', False),
        allows_vars=['customCookieDomain'],
    ),
    _behavior(
        'virtualWaitingRoomWithEdgeWorkers',
        Default('enabled', True),
    ),
    _behavior(
        'visitorPrioritization',
        Default('enabled', True),
        _enabled('userIdentificationByCookie', False),
        _enabled('userIdentificationByHeaders', False),
        _enabled('userIdentificationByIpAddress', False),
        _enabled('userIdentificationByParams', False),
        _enabled('allowedUserCookieManagement', True),
        _enabled('allowedUserCookieLabel', 'VP_AUS'),
        _enabled('allowedUserCookieDuration', 300),
        _enabled('allowedUserCookieRefresh', True),
        _enabled('allowedUserCookieAdvanced', False),
        _enabled('waitingRoomCookieManagement', True),
        _enabled('waitingRoomCookieLabel', 'VP_WRS'),
        _enabled('waitingRoomCookieDuration', 30),
        _enabled('waitingRoomCookieAdvanced', False),
        _enabled('waitingRoomStatusCode', 503),
        _enabled('waitingRoomUseCpCode', False),
    ),
    _behavior(
        'visitorPrioritizationFifo',
        Default('sessionDuration', 300),
        Default('waitingRoomStatusCode', 200),
        Default('waitingRoomUseCpCode', False),
    ),
    _behavior(
        'watermarking',
        Default('enable', True),
        Default('tokenSigningType', 'AKAMAI_PROVIDED', when=eq('enable', True)),
        Default('useOriginalAsA', False, when=eq('enable', True)),
        Default('abVariantLocation', 'FILENAME', when=all_of(eq('enable', True), eq('useOriginalAsA', False))),
    ),
    _behavior('webApplicationFirewall'),
    _behavior(
        'webSockets',
        Default('enabled', True),
    ),
    _behavior(
        'webdav',
        Default('enabled', True),
    ),
)


def entries():
    """
    Every catalog entry, criteria first.
    """
    return list(CRITERIA.values()) + list(BEHAVIORS.values())


def lookup(kind, name):
    table = CRITERIA if kind == CRITERIA_KIND else BEHAVIORS
    return table[name]


__all__ = ['RULE_FORMAT', 'CRITERIA', 'BEHAVIORS', 'CRITERIA_KIND', 'BEHAVIOR_KIND', 'CatalogEntry',
           'entries', 'lookup', 'method_name', 'snake_case']
