"""
References:
    - [basics](https://developer.mozilla.org/en-US/docs/Learn/CSS/First_steps/How_CSS_is_structured)
    - [nesting](https://developer.chrome.com/articles/css-nesting/)
    - [scss nesting](https://sass-lang.com/documentation/style-rules/#nesting)

<ruleset>
    <selector/> <block>
        <property/>: <value/> <bang/>;
    </block>
</ruleset>
"""
from cssvendor.css.declaration import Declaration, Template
from cssvendor.css.scanner import Scanner, extract

__all__ = ["Declaration", "Template", "Scanner", "extract"]
