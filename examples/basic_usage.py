"""
基本用法範例

展示替換表、排序模式、逐字元替換與事件回呼。
"""

from strtr import OrderingMode, Replacer, replace_using_chars, replace_using_map


def demo_replace_using_map():
    """長者優先：'ab' 比 'a' 先佔用區間"""
    print("=" * 60)
    print("範例 1: replace_using_map")
    print("=" * 60)

    table = {"a": "1", "ab": "2"}
    print(f"結果: {replace_using_map('xaby', table)}")
    print()


def demo_ordering_mode():
    """同一張表在不同排序模式下的重疊處理"""
    print("=" * 60)
    print("範例 2: 排序模式")
    print("=" * 60)

    table = {"bc": "2", "ab": "1"}
    for mode in OrderingMode:
        print(f"{mode.value:>12}: {replace_using_map('abc', table, mode)}")
    print()


def demo_replace_using_chars():
    print("=" * 60)
    print("範例 3: replace_using_chars")
    print("=" * 60)

    print(f"結果: {replace_using_chars('hello', 'el', 'ip')}")
    print()


def demo_events():
    """使用 on_event 取得每一筆替換"""
    print("=" * 60)
    print("範例 4: on_event 回呼")
    print("=" * 60)

    def on_event(event):
        print(f"  [{event['start']}, {event['end']}] '{event['needle']}' -> '{event['replacement']}'")

    replacer = Replacer({"cat": "dog", "sat": "ran"}, on_event=on_event)
    print(f"結果: {replacer.replace('the cat sat on the cat')}")
    print()


if __name__ == "__main__":
    demo_replace_using_map()
    demo_ordering_mode()
    demo_replace_using_chars()
    demo_events()
