"""
core/cli - Click CLI, Rich 콘솔 출력, i18n
"""
