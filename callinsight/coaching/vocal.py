"""
Threshold-driven insight, recommendation and voice-coaching text for the vocalytics report.
Every rule is independent and evaluated in the order written; empty lists fall back to a fixed line.
"""

from callinsight.schemas import IndustryComparison, VocalMetrics, VocalQuality, VoiceCoaching
from callinsight.scoring import industry_comparison

INSIGHTS_FALLBACK = "Standard call interaction completed with adequate performance"
GENERAL_RECOMMENDATIONS = (
    "Continue practicing vocal variety to maintain customer engagement throughout calls",
    "Record and review your calls regularly to track improvement in identified areas",
)
STRENGTHS_FALLBACK = "Adequate performance in basic communication areas"
WEAKNESSES_FALLBACK = "Minor areas for refinement identified"
RECOMMENDATIONS_FALLBACK = "Continue current practices and focus on consistency"
EXERCISES_FALLBACK = "Regular vocal warm-ups and practice sessions"


def generate_vocal_insights(metrics: VocalMetrics, quality: VocalQuality) -> list[str]:
    insights = []

    rate = metrics.speaking_rate
    if rate > 180:
        insights.append(
            f"Speaking rate is {rate} WPM - consider slowing down for better comprehension (optimal: 140-170 WPM)"
        )
    elif rate < 120:
        insights.append(f"Speaking rate is {rate} WPM - consider speaking more dynamically (optimal: 140-170 WPM)")
    elif 140 <= rate <= 170:
        insights.append(f"Excellent speaking rate of {rate} WPM - within optimal range for clear communication")

    if metrics.filler_word_count > 10:
        insights.append(
            f"High filler word usage detected ({metrics.filler_word_count} total, "
            f"{metrics.filler_word_rate}/min) - focus on reducing 'um', 'uh', and similar expressions"
        )
    elif metrics.filler_word_count <= 3:
        insights.append(
            f"Excellent filler word control ({metrics.filler_word_count} total) - speech is clear and professional"
        )

    if quality.confidence < 70:
        insights.append(
            f"Confidence level at {quality.confidence}% - consider using more definitive language "
            "and avoiding uncertainty expressions"
        )
    elif quality.confidence > 85:
        insights.append(f"Strong confidence demonstrated ({quality.confidence}%) - excellent use of assertive language")

    if quality.empathy > 80:
        insights.append(
            f"Excellent empathy demonstrated ({quality.empathy}%) - strong emotional connection with customer"
        )
    elif quality.empathy < 50:
        insights.append(
            f"Empathy could be improved ({quality.empathy}%) - consider using more understanding and supportive language"
        )

    if quality.professionalism > 85:
        insights.append(
            f"Outstanding professionalism ({quality.professionalism}%) - maintained appropriate language "
            "and tone throughout"
        )
    elif quality.professionalism < 60:
        insights.append(
            f"Professionalism needs improvement ({quality.professionalism}%) - focus on formal language "
            "and courteous expressions"
        )

    if metrics.interruption_count > 3:
        insights.append(
            f"Multiple interruptions detected ({metrics.interruption_count}) - practice active listening "
            "and allow customer to complete thoughts"
        )
    elif metrics.interruption_count == 0:
        insights.append("Excellent listening skills demonstrated - no interruptions detected")

    if metrics.speech_clarity < 70:
        insights.append(
            f"Speech clarity at {metrics.speech_clarity}% - focus on articulation and reducing filler words"
        )
    elif metrics.speech_clarity > 85:
        insights.append(
            f"Excellent speech clarity ({metrics.speech_clarity}%) - very clear and articulate communication"
        )

    if metrics.energy_level < 60:
        insights.append(
            f"Energy level could be improved ({metrics.energy_level}%) - consider more dynamic and engaging delivery"
        )
    elif metrics.energy_level > 85:
        insights.append(
            f"Great energy and enthusiasm ({metrics.energy_level}%) - engaging and dynamic presentation"
        )

    return insights or [INSIGHTS_FALLBACK]


def generate_vocal_recommendations(metrics: VocalMetrics, quality: VocalQuality) -> list[str]:
    """Targeted recommendations, always followed by the two general ones."""
    recommendations = []

    if metrics.speaking_rate > 180:
        recommendations.append(
            "Practice speaking at 140-170 words per minute for optimal comprehension - try reading aloud with a timer"
        )
    elif metrics.speaking_rate < 120:
        recommendations.append(
            "Increase speaking pace to 140-170 WPM - practice with energetic content to build natural rhythm"
        )

    if metrics.filler_word_rate > 3:
        recommendations.append(
            "Implement pause-and-breathe technique instead of using filler words - practice silent pauses"
        )
        recommendations.append("Record practice sessions to identify and reduce specific filler word patterns")

    if quality.confidence < 70:
        recommendations.append(
            "Use definitive language: 'I will' instead of 'I think I can' - practice assertive phrases"
        )
        recommendations.append("Prepare key responses in advance to sound more confident and knowledgeable")

    if quality.empathy < 60:
        recommendations.append(
            "Use empathetic phrases like 'I understand how that must feel' and 'I can see why that's concerning'"
        )
        recommendations.append(
            "Practice active listening techniques and acknowledge customer emotions before providing solutions"
        )

    if quality.professionalism < 70:
        recommendations.append(
            "Use formal greetings and closings consistently - avoid casual language during business calls"
        )
        recommendations.append(
            "Maintain professional tone throughout - replace casual words with business-appropriate alternatives"
        )

    if metrics.speech_clarity < 75:
        recommendations.append("Focus on clear articulation - practice tongue twisters and pronunciation exercises")
        recommendations.append("Slow down slightly and emphasize key words for better clarity")

    if metrics.energy_level < 65:
        recommendations.append("Increase vocal energy - practice speaking with enthusiasm and vary your tone")
    if metrics.speech_rhythm < 70:
        recommendations.append("Work on speech rhythm - practice with a metronome to develop consistent pacing")
    if metrics.breath_control < 70:
        recommendations.append("Improve breath control - practice diaphragmatic breathing exercises before calls")

    recommendations.extend(GENERAL_RECOMMENDATIONS)
    return recommendations


def generate_voice_coaching(metrics: VocalMetrics, quality: VocalQuality) -> VoiceCoaching:
    strengths: list[str] = []
    weaknesses: list[str] = []
    recommendations: list[str] = []
    exercises: list[str] = []

    if quality.confidence > 80:
        strengths.append("Excellent confidence in delivery and language choice")
    if quality.professionalism > 85:
        strengths.append("Outstanding professional communication style")
    if metrics.speech_clarity > 80:
        strengths.append("Clear and articulate speech patterns")
    if metrics.filler_word_rate < 2:
        strengths.append("Excellent control of filler words and speech flow")
    if 140 <= metrics.speaking_rate <= 170:
        strengths.append("Optimal speaking pace for comprehension")
    if quality.empathy > 75:
        strengths.append("Strong empathetic communication and customer connection")
    if metrics.interruption_count == 0:
        strengths.append("Excellent listening skills with no interruptions")

    if quality.confidence < 60:
        weaknesses.append("Could improve confidence in delivery and word choice")
        recommendations.append("Practice affirmation techniques and prepare confident responses")
        exercises.append("Daily confidence-building vocal exercises with assertive language")

    if metrics.filler_word_rate > 5:
        weaknesses.append(f"High frequency of filler words ({metrics.filler_word_rate}/min)")
        recommendations.append("Implement pause-and-breathe technique instead of filler words")
        exercises.append("Filler word awareness training with recording practice")

    if metrics.speaking_rate > 180:
        weaknesses.append(f"Speaking rate too fast ({metrics.speaking_rate} WPM)")
        recommendations.append("Practice slower, more deliberate speech patterns")
        exercises.append("Metronome-based pacing exercises")
    elif metrics.speaking_rate < 120:
        weaknesses.append(f"Speaking rate too slow ({metrics.speaking_rate} WPM)")
        recommendations.append("Practice more dynamic and energetic delivery")
        exercises.append("Energy-building vocal warm-ups")

    if quality.empathy < 50:
        weaknesses.append("Could improve empathetic communication")
        recommendations.append("Practice active listening and emotional acknowledgment")
        exercises.append("Empathy-building conversation practice")

    if metrics.speech_clarity < 70:
        weaknesses.append(f"Speech clarity needs improvement ({metrics.speech_clarity}%)")
        recommendations.append("Focus on articulation and pronunciation")
        exercises.append("Daily articulation drills and tongue twisters")

    if quality.professionalism < 70:
        weaknesses.append("Professional language usage could be enhanced")
        recommendations.append("Study and practice business communication standards")
        exercises.append("Professional vocabulary building exercises")

    return VoiceCoaching(
        strengths=strengths or [STRENGTHS_FALLBACK],
        weaknesses=weaknesses or [WEAKNESSES_FALLBACK],
        specific_recommendations=recommendations or [RECOMMENDATIONS_FALLBACK],
        practice_exercises=exercises or [EXERCISES_FALLBACK],
        industry_comparison=industry_comparison(metrics, quality),
    )


def empty_voice_coaching() -> VoiceCoaching:
    return VoiceCoaching(
        strengths=[STRENGTHS_FALLBACK],
        weaknesses=[WEAKNESSES_FALLBACK],
        specific_recommendations=[RECOMMENDATIONS_FALLBACK],
        practice_exercises=[EXERCISES_FALLBACK],
        industry_comparison=IndustryComparison(),
    )
