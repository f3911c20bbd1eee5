"""Windows Update agent result codes (wuerror.h)."""
from __future__ import annotations

ENTRIES: tuple[tuple[int, str], ...] = (
    (0x00240001, "WU_S_SERVICE_STOP\n(Windows Update Agent was stopped successfully)"),
    (0x00240002, "WU_S_SELFUPDATE\n(Windows Update Agent updated itself)"),
    (0x00240003, "WU_S_UPDATE_ERROR\n(Operation completed successfully but there were errors applying the updates)"),
    (0x00240004, "WU_S_MARKED_FOR_DISCONNECT\n(A callback was marked to be disconnected later because the request to disconnect the operation came while a callback was executing)"),
    (0x00240005, "WU_S_REBOOT_REQUIRED\n(The system must be restarted to complete installation of the update)"),
    (0x00240006, "WU_S_ALREADY_INSTALLED\n(The update to be installed is already installed on the system)"),
    (0x00240007, "WU_S_ALREADY_UNINSTALLED\n(The update to be removed is not installed on the system)"),
    (0x00240008, "WU_S_ALREADY_DOWNLOADED\n(The update to be downloaded has already been downloaded)"),
    (0x00240009, "WU_S_SOME_UPDATES_SKIPPED_ON_BATTERY\n(The operation completed successfully, but some updates were skipped because the system is running on batteries)"),
    (0x0024000A, "WU_S_ALREADY_REVERTED\n(The update to be reverted is not present on the system)"),
    (0x00240010, "WU_S_SEARCH_CRITERIA_NOT_SUPPORTED\n(The operation is skipped because the update service does not support the requested search criteria)"),
    (0x00242015, "WU_S_UH_INSTALLSTILLPENDING\n(The installation operation for the update is still in progress)"),
    (0x00242016, "WU_S_UH_DOWNLOAD_SIZE_CALCULATED\n(The actual download size has been calculated by the handler)"),
    (0x00245001, "WU_S_SIH_NOOP\n(No operation was required by the server-initiated healing server response)"),
    (0x00246001, "WU_S_DM_ALREADYDOWNLOADING\n(The update to be downloaded is already being downloaded)"),
    (0x00247101, "WU_S_METADATA_SKIPPED_BY_ENFORCEMENTMODE\n(Metadata verification was skipped by enforcement mode)"),
    (0x00247102, "WU_S_METADATA_IGNORED_SIGNATURE_VERIFICATION\n(A server configuration refresh resulted in metadata signature verification to be ignored)"),
    (0x00248001, "WU_S_SEARCH_LOAD_SHEDDING\n(Search operation completed successfully but one or more services were shedding load)"),
    (0x00248002, "WU_S_AAD_DEVICE_TICKET_NOT_NEEDED\n(There was no need to retrieve an AAD device ticket)"),
    (0x80240001, "WU_E_NO_SERVICE\n(Windows Update Agent was unable to provide the service)"),
    (0x80240002, "WU_E_MAX_CAPACITY_REACHED\n(The maximum capacity of the service was exceeded)"),
    (0x80240003, "WU_E_UNKNOWN_ID\n(An ID cannot be found)"),
    (0x80240004, "WU_E_NOT_INITIALIZED\n(The object could not be initialized)"),
    (0x80240005, "WU_E_RANGEOVERLAP\n(The update handler requested a byte range overlapping a previously requested range)"),
    (0x80240006, "WU_E_TOOMANYRANGES\n(The requested number of byte ranges exceeds the maximum number (2^31 - 1))"),
    (0x80240007, "WU_E_INVALIDINDEX\n(The index to a collection was invalid)"),
    (0x80240008, "WU_E_ITEMNOTFOUND\n(The key for the item queried could not be found)"),
    (0x80240009, "WU_E_OPERATIONINPROGRESS\n(Another conflicting operation was in progress. Some operations such as installation cannot be performed twice simultaneously)"),
    (0x8024000A, "WU_E_COULDNOTCANCEL\n(Cancellation of the operation was not allowed)"),
    (0x8024000B, "WU_E_CALL_CANCELLED\n(Operation was cancelled)"),
    (0x8024000C, "WU_E_NOOP\n(No operation was required)"),
    (0x8024000D, "WU_E_XML_MISSINGDATA\n(Windows Update Agent could not find required information in the update's XML data)"),
    (0x8024000E, "WU_E_XML_INVALID\n(Windows Update Agent found invalid information in the update's XML data)"),
    (0x8024000F, "WU_E_CYCLE_DETECTED\n(Circular update relationships were detected in the metadata)"),
    (0x80240010, "WU_E_TOO_DEEP_RELATION\n(Update relationships too deep to evaluate were evaluated)"),
    (0x80240011, "WU_E_INVALID_RELATIONSHIP\n(An invalid update relationship was detected)"),
    (0x80240012, "WU_E_REG_VALUE_INVALID\n(An invalid registry value was read)"),
    (0x80240013, "WU_E_DUPLICATE_ITEM\n(Operation tried to add a duplicate item to a list)"),
    (0x80240014, "WU_E_INVALID_INSTALL_REQUESTED\n(Updates requested for install are not installable by caller)"),
    (0x80240016, "WU_E_INSTALL_NOT_ALLOWED\n(Operation tried to install while another installation was in progress or the system was pending a mandatory restart)"),
    (0x80240017, "WU_E_NOT_APPLICABLE\n(Operation was not performed because there are no applicable updates)"),
    (0x80240018, "WU_E_NO_USERTOKEN\n(Operation failed because a required user token is missing)"),
    (0x80240019, "WU_E_EXCLUSIVE_INSTALL_CONFLICT\n(An exclusive update cannot be installed with other updates at the same time)"),
    (0x8024001A, "WU_E_POLICY_NOT_SET\n(A policy value was not set)"),
    (0x8024001B, "WU_E_SELFUPDATE_IN_PROGRESS\n(The operation could not be performed because the Windows Update Agent is self-updating)"),
    (0x8024001D, "WU_E_INVALID_UPDATE\n(An update contains invalid metadata)"),
    (0x8024001E, "WU_E_SERVICE_STOP\n(Operation did not complete because the service or system was being shut down)"),
    (0x8024001F, "WU_E_NO_CONNECTION\n(Operation did not complete because the network connection was unavailable)"),
    (0x80240020, "WU_E_NO_INTERACTIVE_USER\n(Operation did not complete because there is no logged-on interactive user)"),
    (0x80240021, "WU_E_TIME_OUT\n(Operation did not complete because it timed out)"),
    (0x80240022, "WU_E_ALL_UPDATES_FAILED\n(Operation failed for all the updates)"),
    (0x80240023, "WU_E_EULAS_DECLINED\n(The license terms for all updates were declined)"),
    (0x80240024, "WU_E_NO_UPDATE\n(There are no updates)"),
    (0x80240025, "WU_E_USER_ACCESS_DISABLED\n(Group Policy settings prevented access to Windows Update)"),
    (0x80240026, "WU_E_INVALID_UPDATE_TYPE\n(The type of update is invalid)"),
    (0x80240027, "WU_E_URL_TOO_LONG\n(The URL exceeded the maximum length)"),
    (0x80240028, "WU_E_UNINSTALL_NOT_ALLOWED\n(The update could not be uninstalled because the request did not originate from a WSUS server)"),
    (0x80240029, "WU_E_INVALID_PRODUCT_LICENSE\n(Search may have missed some updates before there is an unlicensed application on the system)"),
    (0x8024002A, "WU_E_MISSING_HANDLER\n(A component required to detect applicable updates was missing)"),
    (0x8024002B, "WU_E_LEGACYSERVER\n(An operation did not complete because it requires a newer version of server)"),
    (0x8024002C, "WU_E_BIN_SOURCE_ABSENT\n(A delta-compressed update could not be installed because it required the source)"),
    (0x8024002D, "WU_E_SOURCE_ABSENT\n(A full-file update could not be installed because it required the source)"),
    (0x8024002E, "WU_E_WU_DISABLED\n(Access to an unmanaged server is not allowed)"),
    (0x8024002F, "WU_E_CALL_CANCELLED_BY_POLICY\n(Operation did not complete because the DisableWindowsUpdateAccess policy was set)"),
    (0x80240030, "WU_E_INVALID_PROXY_SERVER\n(The format of the proxy list was invalid)"),
    (0x80240031, "WU_E_INVALID_FILE\n(The file is in the wrong format)"),
    (0x80240032, "WU_E_INVALID_CRITERIA\n(The search criteria string was invalid)"),
    (0x80240033, "WU_E_EULA_UNAVAILABLE\n(License terms could not be downloaded)"),
    (0x80240034, "WU_E_DOWNLOAD_FAILED\n(Update failed to download)"),
    (0x80240035, "WU_E_UPDATE_NOT_PROCESSED\n(The update was not processed)"),
    (0x80240036, "WU_E_INVALID_OPERATION\n(The object's current state did not allow the operation)"),
    (0x80240037, "WU_E_NOT_SUPPORTED\n(The functionality for the operation is not supported)"),
    (0x80240038, "WU_E_WINHTTP_INVALID_FILE\n(The downloaded file has an unexpected content type)"),
    (0x80240039, "WU_E_TOO_MANY_RESYNC\n(Agent is asked by server to resync too many times)"),
    (0x80240040, "WU_E_NO_SERVER_CORE_SUPPORT\n(WUA API method does not run on Server Core installation)"),
    (0x80240041, "WU_E_SYSPREP_IN_PROGRESS\n(Service is not available while sysprep is running)"),
    (0x80240042, "WU_E_UNKNOWN_SERVICE\n(The update service is no longer registered with AU)"),
    (0x80240043, "WU_E_NO_UI_SUPPORT\n(There is no support for WUA UI)"),
    (0x80240044, "WU_E_PER_MACHINE_UPDATE_ACCESS_DENIED\n(Only administrators can perform this operation on per-machine updates)"),
    (0x80240045, "WU_E_UNSUPPORTED_SEARCHSCOPE\n(A search was attempted with a scope that is not currently supported for this type of search)"),
    (0x80240046, "WU_E_BAD_FILE_URL\n(The URL does not point to a file)"),
    (0x80240047, "WU_E_REVERT_NOT_ALLOWED\n(The update could not be reverted)"),
    (0x80240048, "WU_E_INVALID_NOTIFICATION_INFO\n(The featured update notification info returned by the server is invalid)"),
    (0x80240049, "WU_E_OUTOFRANGE\n(The data is out of range)"),
    (0x8024004A, "WU_E_SETUP_IN_PROGRESS\n(Windows Update agent operations are not available while OS setup is running)"),
    (0x8024004B, "WU_E_ORPHANED_DOWNLOAD_JOB\n(An orphaned downloadjob was found with no active callers)"),
    (0x8024004C, "WU_E_LOW_BATTERY\n(An update could not be installed because the system battery power level is too low)"),
    (0x8024004D, "WU_E_INFRASTRUCTUREFILE_INVALID_FORMAT\n(The downloaded infrastructure file is incorrectly formatted)"),
    (0x8024004E, "WU_E_INFRASTRUCTUREFILE_REQUIRES_SSL\n(The infrastructure file must be downloaded using strong SSL)"),
    (0x8024004F, "WU_E_IDLESHUTDOWN_OPCOUNT_DISCOVERY\n(A discovery call contributed to a non-zero operation count at idle timer shutdown)"),
    (0x80240050, "WU_E_IDLESHUTDOWN_OPCOUNT_SEARCH\n(A search call contributed to a non-zero operation count at idle timer shutdown)"),
    (0x80240051, "WU_E_IDLESHUTDOWN_OPCOUNT_DOWNLOAD\n(A download call contributed to a non-zero operation count at idle timer shutdown)"),
    (0x80240052, "WU_E_IDLESHUTDOWN_OPCOUNT_INSTALL\n(An install call contributed to a non-zero operation count at idle timer shutdown)"),
    (0x80240053, "WU_E_IDLESHUTDOWN_OPCOUNT_OTHER\n(An unspecified call contributed to a non-zero operation count at idle timer shutdown)"),
    (0x80240054, "WU_E_INTERACTIVE_CALL_CANCELLED\n(An interactive user cancelled this operation, which was started from the Windows Update Agent UI)"),
    (0x80240055, "WU_E_AU_CALL_CANCELLED\n(Automatic Updates cancelled this operation because it applies to an update that is no longer applicable to this computer)"),
    (0x80240056, "WU_E_SYSTEM_UNSUPPORTED\n(This version or edition of the operating system doesn't support the needed functionality)"),
    (0x80240057, "WU_E_NO_SUCH_HANDLER_PLUGIN\n(The requested update download or install handler, or update applicability expression evaluator, is not provided by this Agent plugin)"),
    (0x80240058, "WU_E_INVALID_SERIALIZATION_VERSION\n(The requested serialization version is not supported)"),
    (0x80240059, "WU_E_NETWORK_COST_EXCEEDS_POLICY\n(The current network cost does not meet the conditions set by the network cost policy)"),
    (0x8024005A, "WU_E_CALL_CANCELLED_BY_HIDE\n(The call is cancelled because it applies to an update that is hidden (no longer applicable to this computer))"),
    (0x8024005B, "WU_E_CALL_CANCELLED_BY_INVALID\n(The call is cancelled because it applies to an update that is invalid (no longer applicable to this computer))"),
    (0x8024005C, "WU_E_INVALID_VOLUMEID\n(The specified volume id is invalid)"),
    (0x8024005D, "WU_E_UNRECOGNIZED_VOLUMEID\n(The specified volume id is unrecognized by the system)"),
    (0x8024005E, "WU_E_EXTENDEDERROR_NOTSET\n(The installation extended error code is not specified)"),
    (0x8024005F, "WU_E_EXTENDEDERROR_FAILED\n(The installation extended error code is set to general fail)"),
    (0x80240060, "WU_E_IDLESHUTDOWN_OPCOUNT_SERVICEREGISTRATION\n(A service registration call contributed to a non-zero operation count at idle timer shutdown)"),
    (0x80240061, "WU_E_FILETRUST_SHA2SIGNATURE_MISSING\n(Signature validation of the file fails to find valid SHA2+ signature on MS signed payload)"),
    (0x80240062, "WU_E_UPDATE_NOT_APPROVED\n(The update is not in the servicing approval list)"),
    (0x80240063, "WU_E_CALL_CANCELLED_BY_INTERACTIVE_SEARCH\n(The search call was cancelled by another interactive search against the same service)"),
    (0x80240064, "WU_E_INSTALL_JOB_RESUME_NOT_ALLOWED\n(Resume of install job not allowed due to another installation in progress)"),
    (0x80240065, "WU_E_INSTALL_JOB_NOT_SUSPENDED\n(Resume of install job not allowed because job is not suspended)"),
    (0x80240066, "WU_E_INSTALL_USERCONTEXT_ACCESSDENIED\n(User context passed to installation from caller with insufficient privileges)"),
    (0x80240067, "WU_E_STANDBY_ACTIVITY_NOT_ALLOWED\n(Operation is not allowed because the device is in DC (Direct Current) and DS (Disconnected Standby))"),
    (0x80240068, "WU_E_COULD_NOT_EVALUATE_PROPERTY\n(The property could not be evaluated)"),
    (0x80240FFF, "WU_E_UNEXPECTED\n(An operation failed due to reasons not covered by another error code)"),
    (0x80241001, "WU_E_MSI_WRONG_VERSION\n(Search may have missed some updates because the Windows Installer is less than version 3.1)"),
    (0x80241002, "WU_E_MSI_NOT_CONFIGURED\n(Search may have missed some updates because the Windows Installer is not configured)"),
    (0x80241003, "WU_E_MSP_DISABLED\n(Search may have missed some updates because policy has disabled Windows Installer patching)"),
    (0x80241004, "WU_E_MSI_WRONG_APP_CONTEXT\n(An update could not be applied because the application is installed per-user)"),
    (0x80241005, "WU_E_MSI_NOT_PRESENT\n(Search may have missed some updates because the Windows Installer is less than version 3.1)"),
    (0x80241FFF, "WU_E_MSP_UNEXPECTED\n(Search may have missed some updates because there was a failure of the Windows Installer)"),
    (0x80244000, "WU_E_PT_SOAPCLIENT_BASE\n(WU_E_PT_SOAPCLIENT_* error codes map to the SOAPCLIENT_ERROR enum of the ATL Server Library)"),
    (0x80244001, "WU_E_PT_SOAPCLIENT_INITIALIZE\n(Same as SOAPCLIENT_INITIALIZE_ERROR - initialization of the SOAP client failed, possibly because of an MSXML installation failure)"),
    (0x80244002, "WU_E_PT_SOAPCLIENT_OUTOFMEMORY\n(Same as SOAPCLIENT_OUTOFMEMORY - SOAP client failed because it ran out of memory)"),
    (0x80244003, "WU_E_PT_SOAPCLIENT_GENERATE\n(Same as SOAPCLIENT_GENERATE_ERROR - SOAP client failed to generate the request)"),
    (0x80244004, "WU_E_PT_SOAPCLIENT_CONNECT\n(Same as SOAPCLIENT_CONNECT_ERROR - SOAP client failed to connect to the server)"),
    (0x80244005, "WU_E_PT_SOAPCLIENT_SEND\n(Same as SOAPCLIENT_SEND_ERROR - SOAP client failed to send a message for reasons of WU_E_WINHTTP_* error codes)"),
    (0x80244006, "WU_E_PT_SOAPCLIENT_SERVER\n(Same as SOAPCLIENT_SERVER_ERROR - SOAP client failed because there was a server error)"),
    (0x80244007, "WU_E_PT_SOAPCLIENT_SOAPFAULT\n(Same as SOAPCLIENT_SOAPFAULT - SOAP client failed because there was a SOAP fault for reasons of WU_E_PT_SOAP_* error codes)"),
    (0x80244008, "WU_E_PT_SOAPCLIENT_PARSEFAULT\n(Same as SOAPCLIENT_PARSEFAULT_ERROR - SOAP client failed to parse a SOAP fault)"),
    (0x80244009, "WU_E_PT_SOAPCLIENT_READ\n(Same as SOAPCLIENT_READ_ERROR - SOAP client failed while reading the response from the server)"),
    (0x8024400A, "WU_E_PT_SOAPCLIENT_PARSE\n(Same as SOAPCLIENT_PARSE_ERROR - SOAP client failed to parse the response from the server)"),
    (0x8024400B, "WU_E_PT_SOAP_VERSION\n(Same as SOAP_E_VERSION_MISMATCH - SOAP client found an unrecognizable namespace for the SOAP envelope)"),
    (0x8024400C, "WU_E_PT_SOAP_MUST_UNDERSTAND\n(Same as SOAP_E_MUST_UNDERSTAND - SOAP client was unable to understand a header)"),
    (0x8024400D, "WU_E_PT_SOAP_CLIENT\n(Same as SOAP_E_CLIENT - SOAP client found the message was malformed; fix before resending)"),
    (0x8024400E, "WU_E_PT_SOAP_SERVER\n(Same as SOAP_E_SERVER - The SOAP message could not be processed due to a server error; resend later)"),
    (0x8024400F, "WU_E_PT_WMI_ERROR\n(There was an unspecified Windows Management Instrumentation (WMI) error)"),
    (0x80244010, "WU_E_PT_EXCEEDED_MAX_SERVER_TRIPS\n(The number of round trips to the server exceeded the maximum limit)"),
    (0x80244011, "WU_E_PT_SUS_SERVER_NOT_SET\n(WUServer policy value is missing in the registry)"),
    (0x80244012, "WU_E_PT_DOUBLE_INITIALIZATION\n(Initialization failed because the object was already initialized)"),
    (0x80244013, "WU_E_PT_INVALID_COMPUTER_NAME\n(The computer name could not be determined)"),
    (0x80244015, "WU_E_PT_REFRESH_CACHE_REQUIRED\n(The reply from the server indicates that the server was changed or the cookie was invalid; refresh the state of the internal cache and retry)"),
    (0x80244016, "WU_E_PT_HTTP_STATUS_BAD_REQUEST\n(Same as HTTP status 400 - the server could not process the request due to invalid syntax)"),
    (0x80244017, "WU_E_PT_HTTP_STATUS_DENIED\n(Same as HTTP status 401 - the requested resource requires user authentication)"),
    (0x80244018, "WU_E_PT_HTTP_STATUS_FORBIDDEN\n(Same as HTTP status 403 - server understood the request, but declined to fulfill it)"),
    (0x80244019, "WU_E_PT_HTTP_STATUS_NOT_FOUND\n(Same as HTTP status 404 - the server cannot find the requested URI (Uniform Resource Identifier))"),
    (0x8024401A, "WU_E_PT_HTTP_STATUS_BAD_METHOD\n(Same as HTTP status 405 - the HTTP method is not allowed)"),
    (0x8024401B, "WU_E_PT_HTTP_STATUS_PROXY_AUTH_REQ\n(Same as HTTP status 407 - proxy authentication is required)"),
    (0x8024401C, "WU_E_PT_HTTP_STATUS_REQUEST_TIMEOUT\n(Same as HTTP status 408 - the server timed out waiting for the request)"),
    (0x8024401D, "WU_E_PT_HTTP_STATUS_CONFLICT\n(Same as HTTP status 409 - the request was not completed due to a conflict with the current state of the resource)"),
    (0x8024401E, "WU_E_PT_HTTP_STATUS_GONE\n(Same as HTTP status 410 - requested resource is no longer available at the server)"),
    (0x8024401F, "WU_E_PT_HTTP_STATUS_SERVER_ERROR\n(Same as HTTP status 500 - an error internal to the server prevented fulfilling the request)"),
    (0x80244020, "WU_E_PT_HTTP_STATUS_NOT_SUPPORTED\n(Same as HTTP status 500 - server does not support the functionality required to fulfill the request)"),
    (0x80244021, "WU_E_PT_HTTP_STATUS_BAD_GATEWAY\n(Same as HTTP status 502 - the server, while acting as a gateway or proxy, received an invalid response from the upstream server it accessed in attempting to fulfill the request)"),
    (0x80244022, "WU_E_PT_HTTP_STATUS_SERVICE_UNAVAIL\n(Same as HTTP status 503 - the service is temporarily overloaded)"),
    (0x80244023, "WU_E_PT_HTTP_STATUS_GATEWAY_TIMEOUT\n(Same as HTTP status 503 - the request was timed out waiting for a gateway)"),
    (0x80244024, "WU_E_PT_HTTP_STATUS_VERSION_NOT_SUP\n(Same as HTTP status 505 - the server does not support the HTTP protocol version used for the request)"),
    (0x80244025, "WU_E_PT_FILE_LOCATIONS_CHANGED\n(Operation failed due to a changed file location; refresh internal state and resend)"),
    (0x80244026, "WU_E_PT_REGISTRATION_NOT_SUPPORTED\n(Operation failed because Windows Update Agent does not support registration with a non-WSUS server)"),
    (0x80244027, "WU_E_PT_NO_AUTH_PLUGINS_REQUESTED\n(The server returned an empty authentication information list)"),
    (0x80244028, "WU_E_PT_NO_AUTH_COOKIES_CREATED\n(Windows Update Agent was unable to create any valid authentication cookies)"),
    (0x80244029, "WU_E_PT_INVALID_CONFIG_PROP\n(A configuration property value was wrong)"),
    (0x8024402A, "WU_E_PT_CONFIG_PROP_MISSING\n(A configuration property value was missing)"),
    (0x8024402B, "WU_E_PT_HTTP_STATUS_NOT_MAPPED\n(The HTTP request could not be completed and the reason did not correspond to any of the WU_E_PT_HTTP_* error codes)"),
    (0x8024402C, "WU_E_PT_WINHTTP_NAME_NOT_RESOLVED\n(Same as ERROR_WINHTTP_NAME_NOT_RESOLVED - the proxy server or target server name cannot be resolved)"),
    (0x8024402D, "WU_E_PT_LOAD_SHEDDING\n(The server is shedding load)"),
    (0x8024402E, "WU_E_PT_CLIENT_ENFORCED_LOAD_SHEDDING\n(Windows Update Agent is enforcing honoring the service load shedding interval)"),
    (0x8024502D, "WU_E_PT_SAME_REDIR_ID\n(Windows Update Agent failed to download a redirector cabinet file with a new redirectorId value from the server during the recovery)"),
    (0x8024502E, "WU_E_PT_NO_MANAGED_RECOVER\n(A redirector recovery action did not complete because the server is managed)"),
    (0x8024402F, "WU_E_PT_ECP_SUCCEEDED_WITH_ERRORS\n(External cab file processing completed with some errors)"),
    (0x80244030, "WU_E_PT_ECP_INIT_FAILED\n(The external cab processor initialization did not complete)"),
    (0x80244031, "WU_E_PT_ECP_INVALID_FILE_FORMAT\n(The format of a metadata file was invalid)"),
    (0x80244032, "WU_E_PT_ECP_INVALID_METADATA\n(External cab processor found invalid metadata)"),
    (0x80244033, "WU_E_PT_ECP_FAILURE_TO_EXTRACT_DIGEST\n(The file digest could not be extracted from an external cab file)"),
    (0x80244034, "WU_E_PT_ECP_FAILURE_TO_DECOMPRESS_CAB_FILE\n(An external cab file could not be decompressed)"),
    (0x80244035, "WU_E_PT_ECP_FILE_LOCATION_ERROR\n(External cab processor was unable to get file locations)"),
    (0x80240436, "WU_E_PT_CATALOG_SYNC_REQUIRED\n(The server does not support category-specific search; Full catalog search has to be issued instead)"),
    (0x80240437, "WU_E_PT_SECURITY_VERIFICATION_FAILURE\n(There was a problem authorizing with the service)"),
    (0x80240438, "WU_E_PT_ENDPOINT_UNREACHABLE\n(There is no route or network connectivity to the endpoint)"),
    (0x80240439, "WU_E_PT_INVALID_FORMAT\n(The data received does not meet the data contract expectations)"),
    (0x8024043A, "WU_E_PT_INVALID_URL\n(The url is invalid)"),
    (0x8024043B, "WU_E_PT_NWS_NOT_LOADED\n(Unable to load NWS runtime)"),
    (0x8024043C, "WU_E_PT_PROXY_AUTH_SCHEME_NOT_SUPPORTED\n(The proxy auth scheme is not supported)"),
    (0x8024043D, "WU_E_SERVICEPROP_NOTAVAIL\n(The requested service property is not available)"),
    (0x8024043E, "WU_E_PT_ENDPOINT_REFRESH_REQUIRED\n(The endpoint provider plugin requires online refresh)"),
    (0x8024043F, "WU_E_PT_ENDPOINTURL_NOTAVAIL\n(A URL for the requested service endpoint is not available)"),
    (0x80240440, "WU_E_PT_ENDPOINT_DISCONNECTED\n(The connection to the service endpoint died)"),
    (0x80240441, "WU_E_PT_INVALID_OPERATION\n(The operation is invalid because protocol talker is in an inappropriate state)"),
    (0x80240442, "WU_E_PT_OBJECT_FAULTED\n(The object is in a faulted state due to a previous error)"),
    (0x80240443, "WU_E_PT_NUMERIC_OVERFLOW\n(The operation would lead to numeric overflow)"),
    (0x80240444, "WU_E_PT_OPERATION_ABORTED\n(The operation was aborted)"),
    (0x80240445, "WU_E_PT_OPERATION_ABANDONED\n(The operation was abandoned)"),
    (0x80240446, "WU_E_PT_QUOTA_EXCEEDED\n(A quota was exceeded)"),
    (0x80240447, "WU_E_PT_NO_TRANSLATION_AVAILABLE\n(The information was not available in the specified language)"),
    (0x80240448, "WU_E_PT_ADDRESS_IN_USE\n(The address is already being used)"),
    (0x80240449, "WU_E_PT_ADDRESS_NOT_AVAILABLE\n(The address is not valid for this context)"),
    (0x8024044A, "WU_E_PT_OTHER\n(Unrecognized error occurred in the Windows Web Services framework)"),
    (0x8024044B, "WU_E_PT_SECURITY_SYSTEM_FAILURE\n(A security operation failed in the Windows Web Services framework)"),
    (0x80244100, "WU_E_PT_DATA_BOUNDARY_RESTRICTED\n(The client is data boundary restricted and needs to talk to a restricted endpoint)"),
    (0x80244101, "WU_E_PT_GENERAL_AAD_CLIENT_ERROR\n(The client hit an error in retrieving AAD device ticket)"),
    (0x80244FFF, "WU_E_PT_UNEXPECTED\n(A communication error not covered by another WU_E_PT_* error code)"),
    (0x80245001, "WU_E_REDIRECTOR_LOAD_XML\n(The redirector XML document could not be loaded into the DOM class)"),
    (0x80245002, "WU_E_REDIRECTOR_S_FALSE\n(The redirector XML document is missing some required information)"),
    (0x80245003, "WU_E_REDIRECTOR_ID_SMALLER\n(The redirectorId in the downloaded redirector cab is less than in the cached cab)"),
    (0x80245004, "WU_E_REDIRECTOR_UNKNOWN_SERVICE\n(The service ID is not supported in the service environment)"),
    (0x80245005, "WU_E_REDIRECTOR_UNSUPPORTED_CONTENTTYPE\n(The response from the redirector server had an unsupported content type)"),
    (0x80245006, "WU_E_REDIRECTOR_INVALID_RESPONSE\n(The response from the redirector server had an error status or was invalid)"),
    (0x80245008, "WU_E_REDIRECTOR_ATTRPROVIDER_EXCEEDED_MAX_NAMEVALUE\n(The maximum number of name value pairs was exceeded by the attribute provider)"),
    (0x80245009, "WU_E_REDIRECTOR_ATTRPROVIDER_INVALID_NAME\n(The name received from the attribute provider was invalid)"),
    (0x8024500A, "WU_E_REDIRECTOR_ATTRPROVIDER_INVALID_VALUE\n(The value received from the attribute provider was invalid)"),
    (0x8024500B, "WU_E_REDIRECTOR_SLS_GENERIC_ERROR\n(There was an error in connecting to or parsing the response from the Service Locator Service redirector server)"),
    (0x8024500C, "WU_E_REDIRECTOR_CONNECT_POLICY\n(Connections to the redirector server are disallowed by managed policy)"),
    (0x8024500D, "WU_E_REDIRECTOR_ONLINE_DISALLOWED\n(The redirector would go online but is disallowed by caller configuration)"),
    (0x802450FF, "WU_E_REDIRECTOR_UNEXPECTED\n(The redirector failed for reasons not covered by another WU_E_REDIRECTOR_* error code)"),
    (0x80245101, "WU_E_SIH_VERIFY_DOWNLOAD_ENGINE\n(Verification of the servicing engine package failed)"),
    (0x80245102, "WU_E_SIH_VERIFY_DOWNLOAD_PAYLOAD\n(Verification of a servicing package failed)"),
    (0x80245103, "WU_E_SIH_VERIFY_STAGE_ENGINE\n(Verification of the staged engine failed)"),
    (0x80245104, "WU_E_SIH_VERIFY_STAGE_PAYLOAD\n(Verification of a staged payload failed)"),
    (0x80245105, "WU_E_SIH_ACTION_NOT_FOUND\n(An internal error occurred where the servicing action was not found)"),
    (0x80245106, "WU_E_SIH_SLS_PARSE\n(There was a parse error in the service environment response)"),
    (0x80245107, "WU_E_SIH_INVALIDHASH\n(A downloaded file failed an integrity check)"),
    (0x80245108, "WU_E_SIH_NO_ENGINE\n(No engine was provided by the server-initiated healing server response)"),
    (0x80245109, "WU_E_SIH_POST_REBOOT_INSTALL_FAILED\n(Post-reboot install failed)"),
    (0x8024510A, "WU_E_SIH_POST_REBOOT_NO_CACHED_SLS_RESPONSE\n(There were pending reboot actions, but cached SLS response was not found post-reboot)"),
    (0x8024510B, "WU_E_SIH_PARSE\n(Parsing command line arguments failed)"),
    (0x8024510C, "WU_E_SIH_SECURITY\n(Security check failed)"),
    (0x8024510D, "WU_E_SIH_PPL\n(PPL check failed)"),
    (0x8024510E, "WU_E_SIH_POLICY\n(Execution was disabled by policy)"),
    (0x8024510F, "WU_E_SIH_STDEXCEPTION\n(A standard exception was caught)"),
    (0x80245110, "WU_E_SIH_NONSTDEXCEPTION\n(A non-standard exception was caught)"),
    (0x80245111, "WU_E_SIH_ENGINE_EXCEPTION\n(The server-initiated healing engine encountered an exception not covered by another WU_E_SIH_* error code)"),
    (0x80245112, "WU_E_SIH_BLOCKED_FOR_PLATFORM\n(You are running SIH Client with cmd not supported on your platform)"),
    (0x80245113, "WU_E_SIH_ANOTHER_INSTANCE_RUNNING\n(Another SIH Client is already running)"),
    (0x80245114, "WU_E_SIH_DNSRESILIENCY_OFF\n(Disable DNS resiliency feature per service configuration)"),
    (0x802451FF, "WU_E_SIH_UNEXPECTED\n(There was a failure for reasons not covered by another WU_E_SIH_* error code)"),
    (0x8024C001, "WU_E_DRV_PRUNED\n(A driver was skipped)"),
    (0x8024C002, "WU_E_DRV_NOPROP_OR_LEGACY\n(A property for the driver could not be found. It may not conform with required specifications)"),
    (0x8024C003, "WU_E_DRV_REG_MISMATCH\n(The registry type read for the driver does not match the expected type)"),
    (0x8024C004, "WU_E_DRV_NO_METADATA\n(The driver update is missing metadata)"),
    (0x8024C005, "WU_E_DRV_MISSING_ATTRIBUTE\n(The driver update is missing a required attribute)"),
    (0x8024C006, "WU_E_DRV_SYNC_FAILED\n(Driver synchronization failed)"),
    (0x8024C007, "WU_E_DRV_NO_PRINTER_CONTENT\n(Information required for the synchronization of applicable printers is missing)"),
    (0x8024C008, "WU_E_DRV_DEVICE_PROBLEM\n(After installing a driver update, the updated device has reported a problem)"),
    (0x8024CFFF, "WU_E_DRV_UNEXPECTED\n(A driver error not covered by another WU_E_DRV_* code)"),
    (0x80248000, "WU_E_DS_SHUTDOWN\n(An operation failed because Windows Update Agent is shutting down)"),
    (0x80248001, "WU_E_DS_INUSE\n(An operation failed because the data store was in use)"),
    (0x80248002, "WU_E_DS_INVALID\n(The current and expected states of the data store do not match)"),
    (0x80248003, "WU_E_DS_TABLEMISSING\n(The data store is missing a table)"),
    (0x80248004, "WU_E_DS_TABLEINCORRECT\n(The data store contains a table with unexpected columns)"),
    (0x80248005, "WU_E_DS_INVALIDTABLENAME\n(A table could not be opened because the table is not in the data store)"),
    (0x80248006, "WU_E_DS_BADVERSION\n(The current and expected versions of the data store do not match)"),
    (0x80248007, "WU_E_DS_NODATA\n(The information requested is not in the data store)"),
    (0x80248008, "WU_E_DS_MISSINGDATA\n(The data store is missing required information or has a NULL in a table column that requires a non-null value)"),
    (0x80248009, "WU_E_DS_MISSINGREF\n(The data store is missing required information or has a reference to missing license terms, file, localized property or linked row)"),
    (0x8024800A, "WU_E_DS_UNKNOWNHANDLER\n(The update was not processed because its update handler could not be recognized)"),
    (0x8024800B, "WU_E_DS_CANTDELETE\n(The update was not deleted because it is still referenced by one or more services)"),
    (0x8024800C, "WU_E_DS_LOCKTIMEOUTEXPIRED\n(The data store section could not be locked within the allotted time)"),
    (0x8024800D, "WU_E_DS_NOCATEGORIES\n(The category was not added because it contains no parent categories and is not a top-level category itself)"),
    (0x8024800E, "WU_E_DS_ROWEXISTS\n(The row was not added because an existing row has the same primary key)"),
    (0x8024800F, "WU_E_DS_STOREFILELOCKED\n(The data store could not be initialized because it was locked by another process)"),
    (0x80248010, "WU_E_DS_CANNOTREGISTER\n(The data store is not allowed to be registered with COM in the current process)"),
    (0x80248011, "WU_E_DS_UNABLETOSTART\n(Could not create a data store object in another process)"),
    (0x80248013, "WU_E_DS_DUPLICATEUPDATEID\n(The server sent the same update to the client with two different revision IDs)"),
    (0x80248014, "WU_E_DS_UNKNOWNSERVICE\n(An operation did not complete because the service is not in the data store)"),
    (0x80248015, "WU_E_DS_SERVICEEXPIRED\n(An operation did not complete because the registration of the service has expired)"),
    (0x80248016, "WU_E_DS_DECLINENOTALLOWED\n(A request to hide an update was declined because it is a mandatory update or because it was deployed with a deadline)"),
    (0x80248017, "WU_E_DS_TABLESESSIONMISMATCH\n(A table was not closed because it is not associated with the session)"),
    (0x80248018, "WU_E_DS_SESSIONLOCKMISMATCH\n(A table was not closed because it is not associated with the session)"),
    (0x80248019, "WU_E_DS_NEEDWINDOWSSERVICE\n(A request to remove the Windows Update service or to unregister it with Automatic Updates was declined because it is a built-in service and/or Automatic Updates cannot fall back to another service)"),
    (0x8024801A, "WU_E_DS_INVALIDOPERATION\n(A request was declined because the operation is not allowed)"),
    (0x8024801B, "WU_E_DS_SCHEMAMISMATCH\n(The schema of the current data store and the schema of a table in a backup XML document do not match)"),
    (0x8024801C, "WU_E_DS_RESETREQUIRED\n(The data store requires a session reset; release the session and retry with a new session)"),
    (0x8024801D, "WU_E_DS_IMPERSONATED\n(A data store operation did not complete because it was requested with an impersonated identity)"),
    (0x8024801E, "WU_E_DS_DATANOTAVAILABLE\n(An operation against update metadata did not complete because the data was never received from server)"),
    (0x8024801F, "WU_E_DS_DATANOTLOADED\n(An operation against update metadata did not complete because the data was available but not loaded from datastore)"),
    (0x80248020, "WU_E_DS_NODATA_NOSUCHREVISION\n(A data store operation did not complete because no such update revision is known)"),
    (0x80248021, "WU_E_DS_NODATA_NOSUCHUPDATE\n(A data store operation did not complete because no such update is known)"),
    (0x80248022, "WU_E_DS_NODATA_EULA\n(A data store operation did not complete because an update's EULA information is missing)"),
    (0x80248023, "WU_E_DS_NODATA_SERVICE\n(A data store operation did not complete because a service's information is missing)"),
    (0x80248024, "WU_E_DS_NODATA_COOKIE\n(A data store operation did not complete because a service's synchronization information is missing)"),
    (0x80248025, "WU_E_DS_NODATA_TIMER\n(A data store operation did not complete because a timer's information is missing)"),
    (0x80248026, "WU_E_DS_NODATA_CCR\n(A data store operation did not complete because a download's information is missing)"),
    (0x80248027, "WU_E_DS_NODATA_FILE\n(A data store operation did not complete because a file's information is missing)"),
    (0x80248028, "WU_E_DS_NODATA_DOWNLOADJOB\n(A data store operation did not complete because a download job's information is missing)"),
    (0x80248029, "WU_E_DS_NODATA_TMI\n(A data store operation did not complete because a service's timestamp information is missing)"),
    (0x80248FFF, "WU_E_DS_UNEXPECTED\n(A data store error not covered by another WU_E_DS_* code)"),
    (0x80249001, "WU_E_INVENTORY_PARSEFAILED\n(Parsing of the rule file failed)"),
    (0x80249002, "WU_E_INVENTORY_GET_INVENTORY_TYPE_FAILED\n(Failed to get the requested inventory type from the server)"),
    (0x80249003, "WU_E_INVENTORY_RESULT_UPLOAD_FAILED\n(Failed to upload inventory result to the server)"),
    (0x80249004, "WU_E_INVENTORY_UNEXPECTED\n(There was an inventory error not covered by another error code)"),
    (0x80249005, "WU_E_INVENTORY_WMI_ERROR\n(A WMI error occurred when enumerating the instances for a particular class)"),
    (0x8024A000, "WU_E_AU_NOSERVICE\n(Automatic Updates was unable to service incoming requests)"),
    (0x8024A002, "WU_E_AU_NONLEGACYSERVER\n(The old version of the Automatic Updates client has stopped because the WSUS server has been upgraded)"),
    (0x8024A003, "WU_E_AU_LEGACYCLIENTDISABLED\n(The old version of the Automatic Updates client was disabled)"),
    (0x8024A004, "WU_E_AU_PAUSED\n(Automatic Updates was unable to process incoming requests because it was paused)"),
    (0x8024A005, "WU_E_AU_NO_REGISTERED_SERVICE\n(No unmanaged service is registered with AU)"),
    (0x8024A006, "WU_E_AU_DETECT_SVCID_MISMATCH\n(The default service registered with AU changed during the search)"),
    (0x8024A007, "WU_E_REBOOT_IN_PROGRESS\n(A reboot is in progress)"),
    (0x8024A008, "WU_E_AU_OOBE_IN_PROGRESS\n(Automatic Updates can't process incoming requests while Windows Welcome is running)"),
    (0x8024AFFF, "WU_E_AU_UNEXPECTED\n(An Automatic Updates error not covered by another WU_E_AU * code)"),
    (0x80242000, "WU_E_UH_REMOTEUNAVAILABLE\n(A request for a remote update handler could not be completed because no remote process is available)"),
    (0x80242001, "WU_E_UH_LOCALONLY\n(A request for a remote update handler could not be completed because the handler is local only)"),
    (0x80242002, "WU_E_UH_UNKNOWNHANDLER\n(A request for an update handler could not be completed because the handler could not be recognized)"),
    (0x80242003, "WU_E_UH_REMOTEALREADYACTIVE\n(A remote update handler could not be created because one already exists)"),
    (0x80242004, "WU_E_UH_DOESNOTSUPPORTACTION\n(A request for the handler to install (uninstall) an update could not be completed because the update does not support install (uninstall))"),
    (0x80242005, "WU_E_UH_WRONGHANDLER\n(An operation did not complete because the wrong handler was specified)"),
    (0x80242006, "WU_E_UH_INVALIDMETADATA\n(A handler operation could not be completed because the update contains invalid metadata)"),
    (0x80242007, "WU_E_UH_INSTALLERHUNG\n(An operation could not be completed because the installer exceeded the time limit)"),
    (0x80242008, "WU_E_UH_OPERATIONCANCELLED\n(An operation being done by the update handler was cancelled)"),
    (0x80242009, "WU_E_UH_BADHANDLERXML\n(An operation could not be completed because the handler-specific metadata is invalid)"),
    (0x8024200A, "WU_E_UH_CANREQUIREINPUT\n(A request to the handler to install an update could not be completed because the update requires user input)"),
    (0x8024200B, "WU_E_UH_INSTALLERFAILURE\n(The installer failed to install (uninstall) one or more updates)"),
    (0x8024200C, "WU_E_UH_FALLBACKTOSELFCONTAINED\n(The update handler should download self-contained content rather than delta-compressed content for the update)"),
    (0x8024200D, "WU_E_UH_NEEDANOTHERDOWNLOAD\n(The update handler did not install the update because it needs to be downloaded again)"),
    (0x8024200E, "WU_E_UH_NOTIFYFAILURE\n(The update handler failed to send notification of the status of the install (uninstall) operation)"),
    (0x8024200F, "WU_E_UH_INCONSISTENT_FILE_NAMES\n(The file names contained in the update metadata and in the update package are inconsistent)"),
    (0x80242010, "WU_E_UH_FALLBACKERROR\n(The update handler failed to fall back to the self-contained content)"),
    (0x80242011, "WU_E_UH_TOOMANYDOWNLOADREQUESTS\n(The update handler has exceeded the maximum number of download requests)"),
    (0x80242012, "WU_E_UH_UNEXPECTEDCBSRESPONSE\n(The update handler has received an unexpected response from CBS)"),
    (0x80242013, "WU_E_UH_BADCBSPACKAGEID\n(The update metadata contains an invalid CBS package identifier)"),
    (0x80242014, "WU_E_UH_POSTREBOOTSTILLPENDING\n(The post-reboot operation for the update is still in progress)"),
    (0x80242015, "WU_E_UH_POSTREBOOTRESULTUNKNOWN\n(The result of the post-reboot operation for the update could not be determined)"),
    (0x80242016, "WU_E_UH_POSTREBOOTUNEXPECTEDSTATE\n(The state of the update after its post-reboot operation has completed is unexpected)"),
    (0x80242017, "WU_E_UH_NEW_SERVICING_STACK_REQUIRED\n(The OS servicing stack must be updated before this update is downloaded or installed)"),
    (0x80242018, "WU_E_UH_CALLED_BACK_FAILURE\n(A callback installer called back with an error)"),
    (0x80242019, "WU_E_UH_CUSTOMINSTALLER_INVALID_SIGNATURE\n(The custom installer signature did not match the signature required by the update)"),
    (0x8024201A, "WU_E_UH_UNSUPPORTED_INSTALLCONTEXT\n(The installer does not support the installation configuration)"),
    (0x8024201B, "WU_E_UH_INVALID_TARGETSESSION\n(The targeted session for install is invalid)"),
    (0x8024201C, "WU_E_UH_DECRYPTFAILURE\n(The handler failed to decrypt the update files)"),
    (0x8024201D, "WU_E_UH_HANDLER_DISABLEDUNTILREBOOT\n(The update handler is disabled until the system reboots)"),
    (0x8024201E, "WU_E_UH_APPX_NOT_PRESENT\n(The AppX infrastructure is not present on the system)"),
    (0x8024201F, "WU_E_UH_NOTREADYTOCOMMIT\n(The update cannot be committed because it has not been previously installed or staged)"),
    (0x80242020, "WU_E_UH_APPX_INVALID_PACKAGE_VOLUME\n(The specified volume is not a valid AppX package volume)"),
    (0x80242021, "WU_E_UH_APPX_DEFAULT_PACKAGE_VOLUME_UNAVAILABLE\n(The configured default storage volume is unavailable)"),
    (0x80242022, "WU_E_UH_APPX_INSTALLED_PACKAGE_VOLUME_UNAVAILABLE\n(The volume on which the application is installed is unavailable)"),
    (0x80242023, "WU_E_UH_APPX_PACKAGE_FAMILY_NOT_FOUND\n(The specified package family is not present on the system)"),
    (0x80242024, "WU_E_UH_APPX_SYSTEM_VOLUME_NOT_FOUND\n(Unable to find a package volume marked as system)"),
    (0x80242025, "WU_E_UH_UA_SESSION_INFO_VERSION_NOT_SUPPORTED\n(UA does not support the version of OptionalSessionInfo)"),
    (0x80242026, "WU_E_UH_RESERVICING_REQUIRED_BASELINE\n(This operation cannot be completed. You must install the baseline update(s) before you can install this update)"),
    (0x80242FFF, "WU_E_UH_UNEXPECTED\n(An update handler error not covered by another WU_E_UH_* code)"),
    (0x80246001, "WU_E_DM_URLNOTAVAILABLE\n(A download manager operation could not be completed because the requested file does not have a URL)"),
    (0x80246002, "WU_E_DM_INCORRECTFILEHASH\n(A download manager operation could not be completed because the file digest was not recognized)"),
    (0x80246003, "WU_E_DM_UNKNOWNALGORITHM\n(A download manager operation could not be completed because the file metadata requested an unrecognized hash algorithm)"),
    (0x80246004, "WU_E_DM_NEEDDOWNLOADREQUEST\n(An operation could not be completed because a download request is required from the download handler)"),
    (0x80246005, "WU_E_DM_NONETWORK\n(A download manager operation could not be completed because the network connection was unavailable)"),
    (0x80246006, "WU_E_DM_WRONGBITSVERSION\n(A download manager operation could not be completed because the version of Background Intelligent Transfer Service (BITS) is incompatible)"),
    (0x80246007, "WU_E_DM_NOTDOWNLOADED\n(The update has not been downloaded)"),
    (0x80246008, "WU_E_DM_FAILTOCONNECTTOBITS\n(A download manager operation failed because the download manager was unable to connect the Background Intelligent Transfer Service (BITS))"),
    (0x80246009, "WU_E_DM_BITSTRANSFERERROR\n(A download manager operation failed because there was an unspecified Background Intelligent Transfer Service (BITS) transfer error)"),
    (0x8024600A, "WU_E_DM_DOWNLOADLOCATIONCHANGED\n(A download must be restarted because the location of the source of the download has changed)"),
    (0x8024600B, "WU_E_DM_CONTENTCHANGED\n(A download must be restarted because the update content changed in a new revision)"),
    (0x8024600C, "WU_E_DM_DOWNLOADLIMITEDBYUPDATESIZE\n(A download failed because the current network limits downloads by update size for the update service)"),
    (0x8024600E, "WU_E_DM_UNAUTHORIZED\n(The download failed because the client was denied authorization to download the content)"),
    (0x8024600F, "WU_E_DM_BG_ERROR_TOKEN_REQUIRED\n(The download failed because the user token associated with the BITS job no longer exists)"),
    (0x80246010, "WU_E_DM_DOWNLOADSANDBOXNOTFOUND\n(The sandbox directory for the downloaded update was not found)"),
    (0x80246011, "WU_E_DM_DOWNLOADFILEPATHUNKNOWN\n(The downloaded update has an unknown file path)"),
    (0x80246012, "WU_E_DM_DOWNLOADFILEMISSING\n(One or more of the files for the downloaded update is missing)"),
    (0x80246013, "WU_E_DM_UPDATEREMOVED\n(An attempt was made to access a downloaded update that has already been removed)"),
    (0x80246014, "WU_E_DM_READRANGEFAILED\n(Windows Update couldn't find a needed portion of a downloaded update's file)"),
    (0x80246016, "WU_E_DM_UNAUTHORIZED_NO_USER\n(The download failed because the client was denied authorization to download the content due to no user logged on)"),
    (0x80246017, "WU_E_DM_UNAUTHORIZED_LOCAL_USER\n(The download failed because the local user was denied authorization to download the content)"),
    (0x80246018, "WU_E_DM_UNAUTHORIZED_DOMAIN_USER\n(The download failed because the domain user was denied authorization to download the content)"),
    (0x80246019, "WU_E_DM_UNAUTHORIZED_MSA_USER\n(The download failed because the MSA account associated with the user was denied authorization to download the content)"),
    (0x8024601A, "WU_E_DM_FALLINGBACKTOBITS\n(The download will be continued by falling back to BITS to download the content)"),
    (0x8024601B, "WU_E_DM_DOWNLOAD_VOLUME_CONFLICT\n(Another caller has requested download to a different volume)"),
    (0x8024601C, "WU_E_DM_SANDBOX_HASH_MISMATCH\n(The hash of the update's sandbox does not match the expected value)"),
    (0x8024601D, "WU_E_DM_HARDRESERVEID_CONFLICT\n(The hard reserve id specified conflicts with an id from another caller)"),
    (0x8024601E, "WU_E_DM_DOSVC_REQUIRED\n(The update has to be downloaded via DO)"),
    (0x8024601F, "WU_E_DM_DOWNLOADTYPE_CONFLICT\n(Windows Update only supports one download type per update at one time. The download failure is by design here since the same update with different download type is operating. Please try again later)"),
    (0x80246FFF, "WU_E_DM_UNEXPECTED\n(There was a download manager error not covered by another WU_E_DM_* error code)"),
    (0x8024D001, "WU_E_SETUP_INVALID_INFDATA\n(Windows Update Agent could not be updated because an INF file contains invalid information)"),
    (0x8024D002, "WU_E_SETUP_INVALID_IDENTDATA\n(Windows Update Agent could not be updated because the wuident.cab file contains invalid information)"),
    (0x8024D003, "WU_E_SETUP_ALREADY_INITIALIZED\n(Windows Update Agent could not be updated because of an internal error that caused setup initialization to be performed twice)"),
    (0x8024D004, "WU_E_SETUP_NOT_INITIALIZED\n(Windows Update Agent could not be updated because setup initialization never completed successfully)"),
    (0x8024D005, "WU_E_SETUP_SOURCE_VERSION_MISMATCH\n(Windows Update Agent could not be updated because the versions specified in the INF do not match the actual source file versions)"),
    (0x8024D006, "WU_E_SETUP_TARGET_VERSION_GREATER\n(Windows Update Agent could not be updated because a WUA file on the target system is newer than the corresponding source file)"),
    (0x8024D007, "WU_E_SETUP_REGISTRATION_FAILED\n(Windows Update Agent could not be updated because regsvr32.exe returned an error)"),
    (0x8024D008, "WU_E_SELFUPDATE_SKIP_ON_FAILURE\n(An update to the Windows Update Agent was skipped because previous attempts to update have failed)"),
    (0x8024D009, "WU_E_SETUP_SKIP_UPDATE\n(An update to the Windows Update Agent was skipped due to a directive in the wuident.cab file)"),
    (0x8024D00A, "WU_E_SETUP_UNSUPPORTED_CONFIGURATION\n(Windows Update Agent could not be updated because the current system configuration is not supported)"),
    (0x8024D00B, "WU_E_SETUP_BLOCKED_CONFIGURATION\n(Windows Update Agent could not be updated because the system is configured to block the update)"),
    (0x8024D00C, "WU_E_SETUP_REBOOT_TO_FIX\n(Windows Update Agent could not be updated because a restart of the system is required)"),
    (0x8024D00D, "WU_E_SETUP_ALREADYRUNNING\n(Windows Update Agent setup is already running)"),
    (0x8024D00E, "WU_E_SETUP_REBOOTREQUIRED\n(Windows Update Agent setup package requires a reboot to complete installation)"),
    (0x8024D00F, "WU_E_SETUP_HANDLER_EXEC_FAILURE\n(Windows Update Agent could not be updated because the setup handler failed during execution)"),
    (0x8024D010, "WU_E_SETUP_INVALID_REGISTRY_DATA\n(Windows Update Agent could not be updated because the registry contains invalid information)"),
    (0x8024D011, "WU_E_SELFUPDATE_REQUIRED\n(Windows Update Agent must be updated before search can continue)"),
    (0x8024D012, "WU_E_SELFUPDATE_REQUIRED_ADMIN\n(Windows Update Agent must be updated before search can continue.  An administrator is required to perform the operation)"),
    (0x8024D013, "WU_E_SETUP_WRONG_SERVER_VERSION\n(Windows Update Agent could not be updated because the server does not contain update information for this version)"),
    (0x8024D014, "WU_E_SETUP_DEFERRABLE_REBOOT_PENDING\n(Windows Update Agent is successfully updated, but a reboot is required to complete the setup)"),
    (0x8024D015, "WU_E_SETUP_NON_DEFERRABLE_REBOOT_PENDING\n(Windows Update Agent is successfully updated, but a reboot is required to complete the setup)"),
    (0x8024D016, "WU_E_SETUP_FAIL\n(Windows Update Agent could not be updated because of an unknown error)"),
    (0x8024DFFF, "WU_E_SETUP_UNEXPECTED\n(Windows Update Agent could not be updated because of an error not covered by another WU_E_SETUP_* error code)"),
    (0x8024E001, "WU_E_EE_UNKNOWN_EXPRESSION\n(An expression evaluator operation could not be completed because an expression was unrecognized)"),
    (0x8024E002, "WU_E_EE_INVALID_EXPRESSION\n(An expression evaluator operation could not be completed because an expression was invalid)"),
    (0x8024E003, "WU_E_EE_MISSING_METADATA\n(An expression evaluator operation could not be completed because an expression contains an incorrect number of metadata nodes)"),
    (0x8024E004, "WU_E_EE_INVALID_VERSION\n(An expression evaluator operation could not be completed because the version of the serialized expression data is invalid)"),
    (0x8024E005, "WU_E_EE_NOT_INITIALIZED\n(The expression evaluator could not be initialized)"),
    (0x8024E006, "WU_E_EE_INVALID_ATTRIBUTEDATA\n(An expression evaluator operation could not be completed because there was an invalid attribute)"),
    (0x8024E007, "WU_E_EE_CLUSTER_ERROR\n(An expression evaluator operation could not be completed because the cluster state of the computer could not be determined)"),
    (0x8024EFFF, "WU_E_EE_UNEXPECTED\n(There was an expression evaluator error not covered by another WU_E_EE_* error code)"),
    (0x80243001, "WU_E_INSTALLATION_RESULTS_UNKNOWN_VERSION\n(The results of download and installation could not be read from the registry due to an unrecognized data format version)"),
    (0x80243002, "WU_E_INSTALLATION_RESULTS_INVALID_DATA\n(The results of download and installation could not be read from the registry due to an invalid data format)"),
    (0x80243003, "WU_E_INSTALLATION_RESULTS_NOT_FOUND\n(The results of download and installation are not available; the operation may have failed to start)"),
    (0x80243004, "WU_E_TRAYICON_FAILURE\n(A failure occurred when trying to create an icon in the taskbar notification area)"),
    (0x80243FFD, "WU_E_NON_UI_MODE\n(Unable to show UI when in non-UI mode; WU client UI modules may not be installed)"),
    (0x80243FFE, "WU_E_WUCLTUI_UNSUPPORTED_VERSION\n(Unsupported version of WU client UI exported functions)"),
    (0x80243FFF, "WU_E_AUCLIENT_UNEXPECTED\n(There was a user interface error not covered by another WU_E_AUCLIENT_* error code)"),
    (0x8024F001, "WU_E_REPORTER_EVENTCACHECORRUPT\n(The event cache file was defective)"),
    (0x8024F002, "WU_E_REPORTER_EVENTNAMESPACEPARSEFAILED\n(The XML in the event namespace descriptor could not be parsed)"),
    (0x8024F003, "WU_E_INVALID_EVENT\n(The XML in the event namespace descriptor could not be parsed)"),
    (0x8024F004, "WU_E_SERVER_BUSY\n(The server rejected an event because the server was too busy)"),
    (0x8024F005, "WU_E_CALLBACK_COOKIE_NOT_FOUND\n(The specified callback cookie is not found)"),
    (0x8024FFFF, "WU_E_REPORTER_UNEXPECTED\n(There was a reporter error not covered by another error code)"),
    (0x80247001, "WU_E_OL_INVALID_SCANFILE\n(An operation could not be completed because the scan package was invalid)"),
    (0x80247002, "WU_E_OL_NEWCLIENT_REQUIRED\n(An operation could not be completed because the scan package requires a greater version of the Windows Update Agent)"),
    (0x80247003, "WU_E_INVALID_EVENT_PAYLOAD\n(An invalid event payload was specified)"),
    (0x80247004, "WU_E_INVALID_EVENT_PAYLOADSIZE\n(The size of the event payload submitted is invalid)"),
    (0x80247005, "WU_E_SERVICE_NOT_REGISTERED\n(The service is not registered)"),
    (0x80247FFF, "WU_E_OL_UNEXPECTED\n(Search using the scan package failed)"),
    (0x80247100, "WU_E_METADATA_NOOP\n(No operation was required by update metadata verification)"),
    (0x80247101, "WU_E_METADATA_CONFIG_INVALID_BINARY_ENCODING\n(The binary encoding of metadata config data was invalid)"),
    (0x80247102, "WU_E_METADATA_FETCH_CONFIG\n(Unable to fetch required configuration for metadata signature verification)"),
    (0x80247104, "WU_E_METADATA_INVALID_PARAMETER\n(A metadata verification operation failed due to an invalid parameter)"),
    (0x80247105, "WU_E_METADATA_UNEXPECTED\n(A metadata verification operation failed due to reasons not covered by another error code)"),
    (0x80247106, "WU_E_METADATA_NO_VERIFICATION_DATA\n(None of the update metadata had verification data, which may be disabled on the update server)"),
    (0x80247107, "WU_E_METADATA_BAD_FRAGMENTSIGNING_CONFIG\n(The fragment signing configuration used for verifying update metadata signatures was bad)"),
    (0x80247108, "WU_E_METADATA_FAILURE_PROCESSING_FRAGMENTSIGNING_CONFIG\n(There was an unexpected operational failure while parsing fragment signing configuration)"),
    (0x80247120, "WU_E_METADATA_XML_MISSING\n(Required xml data was missing from configuration)"),
    (0x80247121, "WU_E_METADATA_XML_FRAGMENTSIGNING_MISSING\n(Required fragmentsigning data was missing from xml configuration)"),
    (0x80247122, "WU_E_METADATA_XML_MODE_MISSING\n(Required mode data was missing from xml configuration)"),
    (0x80247123, "WU_E_METADATA_XML_MODE_INVALID\n(An invalid metadata enforcement mode was detected)"),
    (0x80247124, "WU_E_METADATA_XML_VALIDITY_INVALID\n(An invalid timestamp validity window configuration was detected)"),
    (0x80247125, "WU_E_METADATA_XML_LEAFCERT_MISSING\n(Required leaf certificate data was missing from xml configuration)"),
    (0x80247126, "WU_E_METADATA_XML_INTERMEDIATECERT_MISSING\n(Required intermediate certificate data was missing from xml configuration)"),
    (0x80247127, "WU_E_METADATA_XML_LEAFCERT_ID_MISSING\n(Required leaf certificate id attribute was missing from xml configuration)"),
    (0x80247128, "WU_E_METADATA_XML_BASE64CERDATA_MISSING\n(Required certificate base64CerData attribute was missing from xml configuration)"),
    (0x80247140, "WU_E_METADATA_BAD_SIGNATURE\n(The metadata for an update was found to have a bad or invalid digital signature)"),
    (0x80247141, "WU_E_METADATA_UNSUPPORTED_HASH_ALG\n(An unsupported hash algorithm for metadata verification was specified)"),
    (0x80247142, "WU_E_METADATA_SIGNATURE_VERIFY_FAILED\n(An error occurred during an update's metadata signature verification)"),
    (0x80247150, "WU_E_METADATATRUST_CERTIFICATECHAIN_VERIFICATION\n(An failure occurred while verifying trust for metadata signing certificate chains)"),
    (0x80247151, "WU_E_METADATATRUST_UNTRUSTED_CERTIFICATECHAIN\n(A metadata signing certificate had an untrusted certificate chain)"),
    (0x80247160, "WU_E_METADATA_TIMESTAMP_TOKEN_MISSING\n(An expected metadata timestamp token was missing)"),
    (0x80247161, "WU_E_METADATA_TIMESTAMP_TOKEN_VERIFICATION_FAILED\n(A metadata Timestamp token failed verification)"),
    (0x80247162, "WU_E_METADATA_TIMESTAMP_TOKEN_UNTRUSTED\n(A metadata timestamp token signer certificate chain was untrusted)"),
    (0x80247163, "WU_E_METADATA_TIMESTAMP_TOKEN_VALIDITY_WINDOW\n(A metadata signature timestamp token was no longer within the validity window)"),
    (0x80247164, "WU_E_METADATA_TIMESTAMP_TOKEN_SIGNATURE\n(A metadata timestamp token failed signature validation)"),
    (0x80247165, "WU_E_METADATA_TIMESTAMP_TOKEN_CERTCHAIN\n(A metadata timestamp token certificate failed certificate chain verification)"),
    (0x80247166, "WU_E_METADATA_TIMESTAMP_TOKEN_REFRESHONLINE\n(A failure occurred when refreshing a missing timestamp token from the network)"),
    (0x80247167, "WU_E_METADATA_TIMESTAMP_TOKEN_ALL_BAD\n(All update metadata verification timestamp tokens from the timestamp token cache are invalid)"),
    (0x80247168, "WU_E_METADATA_TIMESTAMP_TOKEN_NODATA\n(No update metadata verification timestamp tokens exist in the timestamp token cache)"),
    (0x80247169, "WU_E_METADATA_TIMESTAMP_TOKEN_CACHELOOKUP\n(An error occurred during cache lookup of update metadata verification timestamp token)"),
    (0x8024717E, "WU_E_METADATA_TIMESTAMP_TOKEN_VALIDITYWINDOW_UNEXPECTED\n(An metadata timestamp token validity window failed unexpectedly due to reasons not covered by another error code)"),
    (0x8024717F, "WU_E_METADATA_TIMESTAMP_TOKEN_UNEXPECTED\n(An metadata timestamp token verification operation failed due to reasons not covered by another error code)"),
    (0x80247180, "WU_E_METADATA_CERT_MISSING\n(An expected metadata signing certificate was missing)"),
    (0x80247181, "WU_E_METADATA_LEAFCERT_BAD_TRANSPORT_ENCODING\n(The transport encoding of a metadata signing leaf certificate was malformed)"),
    (0x80247182, "WU_E_METADATA_INTCERT_BAD_TRANSPORT_ENCODING\n(The transport encoding of a metadata signing intermediate certificate was malformed)"),
    (0x80247183, "WU_E_METADATA_CERT_UNTRUSTED\n(A metadata certificate chain was untrusted)"),
    (0x8024B001, "WU_E_WUTASK_INPROGRESS\n(The task is currently in progress)"),
    (0x8024B002, "WU_E_WUTASK_STATUS_DISABLED\n(The operation cannot be completed since the task status is currently disabled)"),
    (0x8024B003, "WU_E_WUTASK_NOT_STARTED\n(The operation cannot be completed since the task is not yet started)"),
    (0x8024B004, "WU_E_WUTASK_RETRY\n(The task was stopped and needs to be run again to complete)"),
    (0x8024B005, "WU_E_WUTASK_CANCELINSTALL_DISALLOWED\n(Cannot cancel a non-scheduled install)"),
    (0x8024B101, "WU_E_UNKNOWN_HARDWARECAPABILITY\n(Hardware capability meta data was not found after a sync with the service)"),
    (0x8024B102, "WU_E_BAD_XML_HARDWARECAPABILITY\n(Hardware capability meta data was malformed and/or failed to parse)"),
    (0x8024B103, "WU_E_WMI_NOT_SUPPORTED\n(Unable to complete action due to WMI dependency, which isn't supported on this platform)"),
    (0x8024B104, "WU_E_UPDATE_MERGE_NOT_ALLOWED\n(Merging of the update is not allowed)"),
    (0x8024B105, "WU_E_SKIPPED_UPDATE_INSTALLATION\n(Installing merged updates only. So skipping non mergeable updates)"),
    (0x8024B201, "WU_E_SLS_INVALID_REVISION\n(SLS response returned invalid revision number)"),
    (0x8024B301, "WU_E_FILETRUST_DUALSIGNATURE_RSA\n(File signature validation fails to find valid RSA signature on infrastructure payload)"),
    (0x8024B302, "WU_E_FILETRUST_DUALSIGNATURE_ECC\n(File signature validation fails to find valid ECC signature on infrastructure payload)"),
    (0x8024B303, "WU_E_TRUST_SUBJECT_NOT_TRUSTED\n(The subject is not trusted by WU for the specified action)"),
    (0x8024B304, "WU_E_TRUST_PROVIDER_UNKNOWN\n(Unknown trust provider for WU)"),
)
