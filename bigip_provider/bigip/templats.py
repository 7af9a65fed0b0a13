"""
F5 BIG-IP iControl REST endpoints used by the provider session
"""

# Token login, body carries username, password and loginProviderName
LOGIN = "/mgmt/shared/authn/login"

# Token lifetime, PATCH with {"timeout": seconds}
TOKEN = "/mgmt/shared/authz/tokens/{token}"

# Self IPs, used as the liveness probe
GET_SELF_IPS = "/mgmt/tm/net/self"
