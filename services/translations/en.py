# -*- coding: utf-8 -*-
"""English translations."""

EN_TRANSLATIONS = {
    # Dialogs
    "dialog.error": "Error",
    "dialog.warning": "Warning",
    "dialog.confirm": "Confirm",
    "dialog.startup_failed": "The application could not start.\nSee {path} for details.",

    # Buttons
    "button.previous": "Previous",
    "button.complete_step": "Complete Step",
    "button.next_step": "Next Step",
    "button.reset_step": "Reset Step",

    # Step catalog
    "step.enter_text.title": "Enter Text",
    "step.enter_text.description": "Provide input text for the LLM to process",
    "step.tokenization.title": "Tokenization",
    "step.tokenization.description": "See how text is split into tokens",
    "step.token_to_id.title": "Token to ID Mapping",
    "step.token_to_id.description": "Tokens mapped to vocabulary indices",
    "step.embedding_lookup.title": "Embedding Lookup",
    "step.embedding_lookup.description": "Token IDs mapped to embedding vectors",
    "step.positional_encoding.title": "Positional Encoding",
    "step.positional_encoding.description": "Embeddings enhanced with positional information",
    "step.attention.title": "Attention Mechanism",
    "step.attention.description": "Visualize how tokens attend to each other",
    "step.feedforward.title": "Feedforward Processing",
    "step.feedforward.description": "Embeddings processed through transformer layers",
    "step.output.title": "Output Prediction",
    "step.output.description": "See model's output probabilities and predictions",

    # Step components
    "step.enter_text.label": "Enter your training text",
    "step.completed": "Step completed",
    "step.locked": "Complete the previous step to unlock this one.",
    "step.progress": "Step {current} of {total}",
    "original_text.title": "Original Input Text",

    # Validation
    "validation.enter_text": "Please enter some text to continue.",
    "validation.step_incomplete": "This step has not been completed yet.",
    "validation.check_data": "Please check the entered data.",

    # Reset
    "reset.confirm": "This will reset your progress for step {step} and all subsequent steps. "
                     "Your progress on previous steps will be preserved. Are you sure?",
}
