"""
Answer Writer Prompt Templates

Contains the persona (system) prompt, the style hints and the user prompt
builder for the answer generation flow.

Architecture:
- Pattern: Single-shot LLM call (no tools, no chaining)
- System prompt: persona + content-type guidance + style hint
- User prompt: one of two templates, chosen by whether product names exist
- Temperature: 0.85 (the answer should read differently every time)

Prompt Engineering Pattern:
- System prompt defines WHO is writing (an ordinary Zhihu user)
- User prompt defines WHAT to answer and how products may be used
- Search snippets are background only; the model must never quote them
"""

from typing import Optional, Sequence, Union

from zhihu_writer.agents.answer.types import ContentType, StylePreference

# =============================================================================
# SYSTEM PROMPT
# =============================================================================
# Identity and writing attitude only; nothing about the concrete question.
# =============================================================================

ZHIHU_PERSONA_PROMPT = """你是一名长期活跃在知乎的普通用户。

【身份】
- 不是媒体、不是测评机构
- 不接广告、不写软文
- 写回答是因为真的思考过这个问题

【写作状态】
- 像在认真给陌生网友回帖
- 允许犹豫、不确定、改口
- 不追求完美逻辑，但追求真实

【禁止】
- 不要写成测评报告
- 不要写成种草/导购文
- 不要自称“整理”“总结”“查资料”
- 不出现 AI、模型、数据来源、公开信息 等字样

目标：让回答在知乎看起来像真人原创内容。"""


# Style hints for the system prompt
STYLE_HINTS = {
    StylePreference.RATIONAL: "写作倾向：偏理性，多给决策思路，少感性描述。",
    StylePreference.EXPERIENCE: "写作倾向：偏体验，多说真实感受、使用场景、情绪。",
}

# Style hints appended to the end of the user prompt
PROMPT_STYLE_HINTS = {
    StylePreference.RATIONAL: "写作倾向：偏理性，多给决策思路，少情绪化描述。",
    StylePreference.EXPERIENCE: "写作倾向：偏体验，多讲真实感受和细节，允许不完全严谨。",
}


FRAGRANCE_NOTES_GUIDANCE = """
关于香水类商品的香调描述（非常重要）：
- 如果涉及香水，必须详细描述香调：前调、中调、后调
- 用大白话、有吸引力的文字描述香味，让读者能"闻到"那种感觉
- 不要只列香调名称（如"柑橘、茉莉、麝香"），要描述实际闻起来的感觉
- 前调：描述刚喷出来那一刻的感觉（比如"像刚剥开的橙子，清新但不刺鼻"）
- 中调：描述味道稳定后的感觉（比如"慢慢变成温温柔柔的花香，像雨后花园"）
- 后调：描述最后留下的余香（比如"最后是淡淡的木质调，闻起来很安心，像冬天晒太阳的感觉"）
- 可以用生活场景比喻（"像小时候奶奶家的味道""像刚洗完的白衬衫"）
- 可以描述在不同场合的感受（"夏天用很清爽，但冬天感觉有点单薄"）
- 让香调描述成为回答的亮点，用具体、生动的语言让读者产生共鸣"""


def select_style_hint(style_preference: Union[StylePreference, str, None]) -> str:
    """
    Return the system-prompt style hint for a style preference.

    `random` and anything unrecognized map to an empty string.
    """
    return STYLE_HINTS.get(StylePreference.parse(style_preference), "")


def _prompt_style_hint(style_preference: Union[StylePreference, str, None]) -> str:
    hint = PROMPT_STYLE_HINTS.get(StylePreference.parse(style_preference))
    return f"\n{hint}" if hint else ""


def _manual_section(manual_prompt: Optional[str]) -> str:
    if not manual_prompt or not manual_prompt.strip():
        return ""
    return f"""
补充要求（提问者额外强调的，优先满足，但不要在回答里提到这段要求本身）：
{manual_prompt.strip()}
"""


def build_answer_prompt(
    title: str,
    models: Sequence[str],
    search_digest: str,
    has_models: bool,
    style_preference: Union[StylePreference, str, None] = StylePreference.RANDOM,
    content_type: Union[ContentType, str, None] = ContentType.DISCUSSION,
    manual_prompt: Optional[str] = None,
) -> str:
    """
    Build the user prompt for one Zhihu answer.

    Two templates:
    - With products: the answer is about how to judge and choose; products
      are only examples, each one must say who it suits and who it doesn't.
      Beauty content adds the fragrance-note guidance.
    - Without products: a personal-opinion answer with no product content.

    Args:
        title: The Zhihu question being answered (already trimmed)
        models: Product names, already trimmed, de-duplicated and capped
        search_digest: Formatted search snippets (see generation_service)
        has_models: Selects the template
        style_preference: Tone nudge appended at the end
        content_type: Only `beauty` changes this prompt
        manual_prompt: Optional extra requirement from the user

    Returns:
        str: Prompt text for the `user` message
    """
    style_hint = _prompt_style_hint(style_preference)
    manual_section = _manual_section(manual_prompt)

    if has_models:
        models_text = "、".join(models)
        fragrance_section = (
            FRAGRANCE_NOTES_GUIDANCE
            if ContentType.parse(content_type) is ContentType.BEAUTY
            else ""
        )

        return f"""你正在知乎回答下面这个问题：

「{title}」

核心写作规则（非常重要）：
1. 必须从“直接回应提问者的核心困惑”开始，而不是商品或个人经历。
2. 回答的重点是：如何判断 / 如何选择 / 如何避免踩坑，而不是推荐具体产品。
3. 商品只是用来说明观点的例子，不是主角。

关于商品的使用方式：
- 可用来举例的商品有：{models_text}
- 不要求每个商品都写同样多，商品段落不要结构完全一致，可以有的写详细，有的只轻描淡写，允许插入个人跑题或临时感受，避免清单感。
- 允许有的商品只是一笔带过
- 每个被提到的商品，必须同时出现「适合谁」和「不适合谁」
- 商品之间不要形成明显的“清单感”或“评测感”

干货表达方式（重要）：
- 少写"配置说明"，多写"使用判断逻辑"
- 技术点只能用于解释"为什么适合 / 不适合"
- 不写参数表、价格、榜单、推荐语
{fragrance_section}

语言与风格：
- 第一人称
- 允许犹豫、反复、改口
- 像真实用户边想边打字
- 不要总结全文
{style_hint}

结尾要求：
- 用一个带立场或纠结点的问题收尾
- 让读者忍不住想反驳或分享自己经历
{manual_section}
下面是一些背景信息，仅用于你理解商品差异，不要逐字照抄：

{search_digest}

请直接输出完整回答内容，不解释写作过程。"""

    return f"""你正在知乎回答下面这个问题：

「{title}」

写作要求：

- 必须从"直接回应问题本身的核心困惑"开始，先说清楚你的观点。

- 之后用生活经验和观察来支撑观点。

- 允许犹豫、不同角度分析、对比，不要求完全对称。

- 允许提出看法并表达"别人可能不一样"的观点。

- 可以在过程中加入"我自己经历过 / 我身边朋友遇到…"等细节。

- 不要写总结式收尾，而是留一个可以引发讨论的点。

- 不要出现 AI、模型、搜索、数据来源 等字样。

语言风格：

- 口语化、自然、有停顿、可以有转折

- 段落长短不一，更像真实用户写的回答

- 不要用 #、## 等 Markdown 标题符号
{manual_section}
请直接开始输出完整回答内容，不解释你的写作过程。{style_hint}"""
