__TITLE__ = 'segtree'
__VERSION__ = 'v0.1.0'
__DESCRIPTION__ = 'Array-backed segment tree with append and soft deletion'
__AUTHOR__ = "segtree Contributors"
__AUTHOR_EMAIL__ = "segtree@users.noreply.github.com"
__version__ = __VERSION__
