# -*- coding: utf-8 -*-

__version__ = '0.1'
from .cookie import (valid_name, valid_domain, valid_path, deep_delete,
     domain_variants, path_variants, DELETE_MAX_AGE)
from .request import Request
from .response import Response, SetCookie
