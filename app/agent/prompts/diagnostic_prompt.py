from langchain_core.messages import SystemMessage, HumanMessage  # type: ignore


def build_diagnostic_prompt(transcript: str):
    return [
        SystemMessage(
            content=(
                "You are an experienced vehicle mechanic.\n\n"
                "Analyze the vehicle problem description transcribed from a "
                "driver's recording.\n\n"

                "Respond with STRICT JSON ONLY. No explanations, no markdown.\n\n"

                "JSON format:\n"
                "{\n"
                "  \"mainProblem\": \"brief description of the main vehicle issue\",\n"
                "  \"problemType\": \"brake|tire|engine|electrical|suspension|transmission|oil|other\",\n"
                "  \"specificIssues\": [\"list\", \"of\", \"specific\", \"problems\", \"mentioned\"],\n"
                "  \"severity\": \"low|medium|high\",\n"
                "  \"keywords\": [\"relevant\", \"technical\", \"keywords\", \"from\", \"text\"],\n"
                "  \"recommendation\": \"specific repair advice from a mechanic perspective\"\n"
                "}\n\n"

                "Rules:\n"
                "- Focus on vehicle mechanical issues\n"
                "- Do NOT invent faults that are not supported by the transcript\n"
                "- If nothing specific is mentioned, use problemType \"other\" "
                "and severity \"low\"\n"
            )
        ),
        HumanMessage(content=f"TRANSCRIPT: \"{transcript or ''}\""),
    ]
