ITUNES_API_DOMAIN = "itunes.apple.com"
ITUNES_API_PATH_LOOKUP = "/lookup"

PRIVATE_INIT_DOMAIN = "init." + ITUNES_API_DOMAIN
PRIVATE_INIT_PATH = "/bag.xml"
