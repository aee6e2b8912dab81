"""
Tiny helper script that scores a couple of sample passages with the statistical core.
"""

from __future__ import annotations

import asyncio

from stat_ai_detector import assess_stats, compute_stat_features_async


async def main() -> None:
    samples = [
        "I missed my train again and ended up walking home in the drizzle. Mom called "
        "about the basil plant. It's thriving; I'm not. Just tired.",
        "Cloud computing represents a transformative paradigm that fundamentally "
        "revolutionizes how organizations access and utilize computational resources. "
        "This innovative technology enables seamless, on-demand provisioning of resources.",
    ]

    for sample in samples:
        assessment = assess_stats(await compute_stat_features_async(sample))
        print("-" * 40)
        print(sample)
        print(f"Score: {assessment.score:.3f} ({assessment.label.value})")
        for reason in assessment.reasons:
            print(f"  - {reason}")


if __name__ == "__main__":
    asyncio.run(main())
