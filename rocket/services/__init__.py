"""服务层：协作者实现与服务容器"""
