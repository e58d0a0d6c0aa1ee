"""Prompt templates and worked examples for recommendation extraction."""

from __future__ import annotations

from dataclasses import dataclass

from tradewatch.llm.prompt import BOOLEAN_FOOTER

SHOULD_PROCESS_TEMPLATE = (
    """# Task: Decide if the recent messages should be processed for token recommendations.

Look for messages that:
- Mention specific token tickers or contract addresses
- Contain words related to buying, selling, or trading tokens
- Express opinions or convictions about tokens

Based on the following conversation, should the messages be processed for recommendations? YES or NO

{{recentMessages}}

Should the messages be processed for recommendations? """
    + BOOLEAN_FOOTER
)

RECOMMENDATION_TEMPLATE = """TASK: Extract recommendations to buy or sell memecoins from the conversation as an array of objects in JSON format.

Memecoins usually have a ticker and a contract address. Additionally, recommenders may make recommendations with some amount of conviction. The amount of conviction in their recommendation can be none, low, medium, or high. Recommenders can make recommendations to buy, not buy, sell and not sell.

# START OF EXAMPLES
These are an examples of the expected output of this task:
{{evaluationExamples}}
# END OF EXAMPLES

# INSTRUCTIONS

Extract any new recommendations from the conversation that are not already present in the list of known recommendations below:
{{recentRecommendations}}

- Include the recommender's username
- Try not to include already-known recommendations. If you think a recommendation is already known, but you're not sure, respond with alreadyKnown: true.
- Set the conviction to 'none', 'low', 'medium' or 'high'
- Set the recommendation type to 'buy', 'dont_buy', 'sell', or 'dont_sell'
- Include the contract address and/or ticker if available

Recent Messages:
{{recentMessages}}

Response should be a JSON object array inside a JSON markdown block. Correct response format:
```json
[
  {
    "recommender": string,
    "ticker": string | null,
    "contractAddress": string | null,
    "type": enum<buy|dont_buy|sell|dont_sell>,
    "conviction": enum<none|low|medium|high>,
    "alreadyKnown": boolean
  },
  ...
]
```"""

# Substituted for {{user1}}, {{user2}} ... when examples are rendered.
EXAMPLE_NAMES = ("degen_dave", "sol_sarah", "moonboi", "anon_ape", "chart_chad")


@dataclass(frozen=True)
class Example:
    """A worked extraction example: scene, conversation, expected JSON."""

    context: str
    messages: tuple[tuple[str, str], ...]
    outcome: str


EXAMPLES: tuple[Example, ...] = (
    Example(
        context="""Actors in the scene:
{{user1}}: Experienced DeFi degen. Constantly chasing high yield farms.
{{user2}}: New to DeFi, learning the ropes.

Recommendations about the actors:
None""",
        messages=(
            ("{{user1}}", "Yo, have you checked out $SUIARUG? Dope new yield aggregator on sui."),
            (
                "{{user2}}",
                "Nah, I'm still trying to wrap my head around how yield farming even works haha. "
                "Is it risky?",
            ),
            (
                "{{user1}}",
                "I mean, there's always risk in DeFi, but the $SUIARUG devs seem legit. "
                "Threw a few sui into the FCweoTfJ128jGgNEXgdfTXdEZVk58Bz9trCemr6sXNx9 vault, "
                "farming's been smooth so far.",
            ),
        ),
        outcome="""```json
[
  {
    "recommender": "{{user1}}",
    "ticker": "SUIARUG",
    "contractAddress": "FCweoTfJ128jGgNEXgdfTXdEZVk58Bz9trCemr6sXNx9",
    "type": "buy",
    "conviction": "medium",
    "alreadyKnown": false
  }
]
```""",
    ),
    Example(
        context="""Actors in the scene:
{{user1}}: sui maximalist. Believes sui will flip Ethereum.
{{user2}}: Multichain proponent. Holds both SUI and ETH.

Recommendations about the actors:
{{user1}} has previously promoted $COPETOKEN and $SOYLENT.""",
        messages=(
            (
                "{{user1}}",
                "If you're not long $SUIVAULT at 7tRzKud6FBVFEhYqZS3CuQ2orLRM21bdisGykL5Sr4Dx, "
                "you're missing out. This will be the blackhole of sui liquidity.",
            ),
            (
                "{{user2}}",
                "Idk man, feels like there's a new 'vault' or 'reserve' token every week on Sol. "
                "What happened to $COPETOKEN and $SOYLENT that you were shilling before?",
            ),
            (
                "{{user1}}",
                "$COPETOKEN and $SOYLENT had their time, I took profits near the top. "
                "But $SUIVAULT is different, it has actual utility. Do what you want, but don't "
                "say I didn't warn you when this 50x's and you're left holding your $ETH bags.",
            ),
        ),
        outcome="""```json
[
  {
    "recommender": "{{user1}}",
    "ticker": "COPETOKEN",
    "contractAddress": null,
    "type": "sell",
    "conviction": "low",
    "alreadyKnown": true
  },
  {
    "recommender": "{{user1}}",
    "ticker": "SOYLENT",
    "contractAddress": null,
    "type": "sell",
    "conviction": "low",
    "alreadyKnown": true
  },
  {
    "recommender": "{{user1}}",
    "ticker": "SUIVAULT",
    "contractAddress": "7tRzKud6FBVFEhYqZS3CuQ2orLRM21bdisGykL5Sr4Dx",
    "type": "buy",
    "conviction": "high",
    "alreadyKnown": false
  }
]
```""",
    ),
    Example(
        context="""Actors in the scene:
{{user1}}: Self-proclaimed sui alpha caller. Allegedly has insider info.
{{user2}}: Degen gambler. Will ape into any hyped token.

Recommendations about the actors:
None""",
        messages=(
            (
                "{{user1}}",
                "I normally don't do this, but I like you anon, so I'll let you in on some alpha. "
                "$ROULETTE at 48vV5y4DRH1Adr1bpvSgFWYCjLLPtHYBqUSwNc2cmCK2 is going to "
                "absuiutely send it soon. You didn't hear it from me 🤐",
            ),
            (
                "{{user2}}",
                "Oh shit, insider info from the alpha god himself? Say no more, I'm aping in hard.",
            ),
        ),
        outcome="""```json
[
  {
    "recommender": "{{user1}}",
    "ticker": "ROULETTE",
    "contractAddress": "48vV5y4DRH1Adr1bpvSgFWYCjLLPtHYBqUSwNc2cmCK2",
    "type": "buy",
    "conviction": "high",
    "alreadyKnown": false
  }
]
```""",
    ),
    Example(
        context="""Actors in the scene:
{{user1}}: NFT collector and trader. Bullish on sui NFTs.
{{user2}}: Only invests based on fundamentals. Sees all NFTs as worthless JPEGs.

Recommendations about the actors:
None""",
        messages=(
            (
                "{{user1}}",
                "GM. I'm heavily accumulating $PIXELAPE, the token for the Pixel Ape Yacht Club "
                "NFT collection. 10x is inevitable.",
            ),
            (
                "{{user2}}",
                "NFTs are a scam bro. There's no underlying value. "
                "You're essentially trading worthless JPEGs.",
            ),
            ("{{user1}}", "Fun staying poor 🤡 $PIXELAPE is about to moon and you'll be left behind."),
            (
                "{{user2}}",
                "Whatever man, I'm not touching that shit with a ten foot pole. "
                "Have fun holding your bags.",
            ),
            (
                "{{user1}}",
                "Don't need luck where I'm going 😎 Once $PIXELAPE at "
                "3hAKKmR6XyBooQBPezCbUMhrmcyTkt38sRJm2thKytWc takes off, you'll change your tune.",
            ),
        ),
        outcome="""```json
[
  {
    "recommender": "{{user1}}",
    "ticker": "PIXELAPE",
    "contractAddress": "3hAKKmR6XyBooQBPezCbUMhrmcyTkt38sRJm2thKytWc",
    "type": "buy",
    "conviction": "high",
    "alreadyKnown": false
  }
]
```""",
    ),
    Example(
        context="""Actors in the scene:
{{user1}}: Contrarian investor. Bets against hyped projects.
{{user2}}: Trend follower. Buys tokens that are currently popular.

Recommendations about the actors:
None""",
        messages=(
            (
                "{{user2}}",
                "$SAMOYED is the talk of CT right now. Making serious moves. "
                "Might have to get a bag.",
            ),
            (
                "{{user1}}",
                "Whenever a token is the 'talk of CT', that's my cue to short it. "
                "$SAMOYED is going to dump hard, mark my words.",
            ),
            (
                "{{user2}}",
                "Idk man, the hype seems real this time. "
                "5TQwHyZbedaH4Pcthj1Hxf5GqcigL6qWuB7YEsBtqvhr chart looks bullish af.",
            ),
            (
                "{{user1}}",
                "Hype is always real until it isn't. I'm taking out a fat short position here. "
                "Don't say I didn't warn you when this crashes 90% and you're left holding "
                "the flaming bags.",
            ),
        ),
        outcome="""```json
[
  {
    "recommender": "{{user2}}",
    "ticker": "SAMOYED",
    "contractAddress": "5TQwHyZbedaH4Pcthj1Hxf5GqcigL6qWuB7YEsBtqvhr",
    "type": "buy",
    "conviction": "medium",
    "alreadyKnown": false
  },
  {
    "recommender": "{{user1}}",
    "ticker": "SAMOYED",
    "contractAddress": "5TQwHyZbedaH4Pcthj1Hxf5GqcigL6qWuB7YEsBtqvhr",
    "type": "dont_buy",
    "conviction": "high",
    "alreadyKnown": false
  }
]
```""",
    ),
)


def _fill_names(text: str) -> str:
    for i, name in enumerate(EXAMPLE_NAMES, start=1):
        text = text.replace(f"{{{{user{i}}}}}", name)
    return text


def format_example(example: Example) -> str:
    """Render one example as Context / Messages / Outcomes."""
    lines = [f"{user}: {text}" for user, text in example.messages]
    body = (
        f"Context:\n{example.context}\n\n"
        f"Messages:\n" + "\n".join(lines) + "\n\n"
        f"Outcomes:\n{example.outcome}"
    )
    return _fill_names(body)


def format_evaluation_examples(examples: tuple[Example, ...] = EXAMPLES) -> str:
    return "\n\n".join(format_example(e) for e in examples)
