"""runjava - start a JVM with heap and GC flags derived from container limits.

Example:
    from runjava.limits import detect_ceiling
    from runjava.options import java_options
    from runjava.types import LaunchContext, UserOptions

    ctx = LaunchContext(ceiling=detect_ceiling(), user_options=UserOptions.parse("-Dfoo=1"))
    print(java_options(ctx))
"""

__version__ = "0.1.0"
