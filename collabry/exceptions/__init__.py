
from .base import BaseCustomHTTPException
from .s400 import *
from .s401 import *
from .s403 import *
from .s404 import *
from .s409 import *
from .s500 import *
