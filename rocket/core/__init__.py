"""核心层：异常、配置、协议"""
