"""数据访问层对外抛出的异常。"""


class InvalidArgumentError(ValueError):
    """调用方传入的参数不完整或不合法。"""
