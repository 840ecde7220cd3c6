"""
测试模块

包含项目的单元测试和集成测试。

测试结构:
- test_*.py: 单元测试（模型、转换器、文本提取、Token估算、配置、日志）
- integration/: 基于模拟服务的端到端测试
- fixtures.py: 模拟 OpenAI 兼容服务

测试覆盖:
- 请求/响应格式转换
- 工具调用转换
- 错误处理
- 模拟流式输出
"""
