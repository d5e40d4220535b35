APP_NAME = "treeconf"
ENV_PREFIX = "TREECONF_"
