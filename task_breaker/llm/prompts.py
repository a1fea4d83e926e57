DECOMPOSE_PROMPT = """You are an expert in task management.
Break the following task down into {min_steps} to {max_steps} concrete, actionable steps.

Task: "{title}"
Task deadline: {deadline}
Today's date: {today}

Requirements:
1. Each step MUST be a specific, executable action.
2. Steps MUST be in a logically correct order.
3. Give every step a realistic deadline.
   - The first step is due close to today.
   - The last step is due on the task deadline or just before it.
   - No step may be due after the task deadline.
   - Dates MUST use the "YYYY-MM-DD" format.
4. Return ONLY a JSON array in the format below. No markdown code blocks, no commentary.

[
  {{ "title": "step name", "deadline": "YYYY-MM-DD" }},
  ...
]
"""
